"""
Command-line front end for ipquery.

Looks up one address, several addresses in one bulk request, or the
caller's own public address, and prints the result.
"""

import os
import sys
import json
import argparse
from typing import List, Optional

from .client import query_ip, query_bulk, query_own_ip
from .debug import debug_logger
from .exceptions import IPQueryError


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ipquery command."""
    parser = argparse.ArgumentParser(
        prog='ipquery',
        description='Look up IP address geolocation and risk data via ipquery.io',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  IPQUERY_ENDPOINT=URL               - Base endpoint (default: https://api.ipquery.io/)
  IPQUERY_REQUEST_TIMEOUT=SECONDS    - Request timeout (default: none)
  IPQUERY_DEBUG=true                 - Enable debug mode with diagnostic output
  IPQUERY_DEBUG_LEVEL=basic          - Debug verbosity: basic, detailed, verbose

Examples:
  ipquery 8.8.8.8                    # Look up one address
  ipquery 8.8.8.8 1.1.1.1            # Bulk lookup in a single request
  ipquery --own                      # Show your public IP address
"""
    )

    parser.add_argument('ips', nargs='*', metavar='IP', help='IP address(es) to look up')
    parser.add_argument('--own', action='store_true',
                        help='Print your own public IP address')
    parser.add_argument('--endpoint', default=None,
                        help='Base endpoint URL (overrides IPQUERY_ENDPOINT)')
    parser.add_argument('--compact', action='store_true',
                        help='Print JSON on a single line')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode with request-level diagnostic output')
    parser.add_argument('--debug-level', choices=['basic', 'detailed', 'verbose'], default='basic',
                        help='Debug verbosity level (default: basic)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.own and args.ips:
        parser.error('--own does not take IP addresses')

    if args.debug:
        os.environ['IPQUERY_DEBUG'] = 'true'
        os.environ['IPQUERY_DEBUG_LEVEL'] = args.debug_level
        debug_logger.log_config_info()

    indent = None if args.compact else 2

    try:
        if args.own or not args.ips:
            print(query_own_ip(args.endpoint).strip())
        elif len(args.ips) == 1:
            info = query_ip(args.ips[0], args.endpoint)
            print(info.model_dump_json(indent=indent))
        else:
            infos = query_bulk(args.ips, args.endpoint)
            print(json.dumps([info.model_dump() for info in infos], indent=indent))
    except IPQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
