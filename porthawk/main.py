import argparse
import ipaddress
import sys

from pydantic import ValidationError

from .ui import ScannerUI
from .utils import PortRangeError
from .config import (
    ALL_PORTS,
    DEFAULT_ADDRESS,
    DEFAULT_PORTS,
    DEFAULT_THREADS,
    DEFAULT_TIMEOUT_MS,
    build_config,
)

def non_negative_int(value):
    """argparse type: unsigned integer, like the engine's thread and timeout counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number

def build_parser():
    parser = argparse.ArgumentParser(description="PortHawk - Simple and fast port scanner")
    parser.add_argument("address", nargs="?", default=DEFAULT_ADDRESS, type=ipaddress.ip_address,
                        help=f"Target IP address, IPv4 or IPv6 (Default: {DEFAULT_ADDRESS})")

    # -p and -a cannot be combined
    port_group = parser.add_mutually_exclusive_group()
    port_group.add_argument("-p", "--ports", default=DEFAULT_PORTS, metavar="TARGET_PORTS",
                            help=f"Ports to scan (e.g. 80, 1-1024,3000-4000) (Default: {DEFAULT_PORTS})")
    port_group.add_argument("-a", "--all-ports", action="store_true",
                            help=f"Scan every port ({ALL_PORTS})")

    parser.add_argument("-n", "--threads", type=non_negative_int, default=DEFAULT_THREADS, metavar="NUMBER_OF_THREADS",
                        help=f"Number of threads used for scanning (Default: {DEFAULT_THREADS})")
    parser.add_argument("--timeout", type=non_negative_int, default=DEFAULT_TIMEOUT_MS, metavar="TIMEOUT_MS",
                        help=f"Timeout in milliseconds for each port (Default: {DEFAULT_TIMEOUT_MS})")
    parser.add_argument("-o", "--output", metavar="OUTPUT_FILE_NAME",
                        help="File name to save the scan results")
    return parser

def main(argv=None, engine=None, ui=None):
    """
    CLI entry point. Returns a process exit code.

    `engine` receives the finished ScanConfig. Without one, the
    resolved scan plan is printed instead.
    """
    # 1. CLI Argument Parsing
    args = build_parser().parse_args(argv)
    ui = ui or ScannerUI()

    try:
        # 2. Resolve & validate
        try:
            config = build_config(
                address=args.address,
                ports=args.ports,
                all_ports=args.all_ports,
                threads=args.threads,
                timeout=args.timeout,
                output=args.output,
            )
        except PortRangeError as e:
            ui.show_message(f"Error: {e}")
            return 1
        except ValidationError as e:
            ui.show_message(f"Invalid configuration: {e}")
            return 1

        # 3. Hand off
        if engine is None:
            ui.display_welcome()
            ui.display_config(config)
        else:
            engine(config)
        return 0

    except KeyboardInterrupt:
        ui.show_message("\nScan interrupted by user.", style="yellow")
        return 130

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
