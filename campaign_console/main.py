"""Entry point: search."""

import sys


def main():
    mode = "search"
    if len(sys.argv) > 1:
        mode = sys.argv[1].lower()

    if mode == "search":
        from campaign_console.interfaces.oneshot import main as run_oneshot_main

        as_json = "--json" in sys.argv[2:]
        query_parts = [arg for arg in sys.argv[2:] if arg != "--json"]
        if query_parts:
            query = " ".join(query_parts).strip()
        else:
            query = sys.stdin.read().strip()
        sys.exit(run_oneshot_main(query=query, as_json=as_json))

    else:
        print(f"Unknown mode: {mode}")
        print("Usage: python -m campaign_console.main search [--json] <query>")
        sys.exit(1)


if __name__ == "__main__":
    main()
