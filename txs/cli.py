import argparse
import asyncio
import sys

from common.logging_setup import setup_logging
from txs import view


def main(argv=None):
    p = argparse.ArgumentParser(prog="libra-txs", description="Transaction and view tools")
    p.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    sub = p.add_subparsers(dest="command", required=True)

    v = sub.add_parser("view", help="Call a view function on the node")
    v.add_argument("--function-id", "-f", required=True,
                   help="Fully qualified function id, e.g. 0x1::coin::balance")
    v.add_argument("--type-args", "-t", default=None,
                   help="Comma separated type arguments, e.g. 0x1::libra_coin::LibraCoin")
    v.add_argument("--args", "-a", default=None,
                   help="Comma separated function arguments")
    args = p.parse_args(argv)

    setup_logging(args.log_level)

    try:
        out = asyncio.run(view.run(args.function_id, args.type_args, args.args))
    except Exception as e:
        print(f"ERROR {e}", file=sys.stderr)
        sys.exit(1)
    print("\n=======OUTPUT=======")
    print(out)


if __name__ == "__main__":
    main()
