#!/usr/bin/env python3
"""
PortHawk - Simple and fast port scanner

Resolves the target address, port selection and scan settings from the
command line into one validated scan configuration.

Usage:
    python porthawk.py 192.168.1.10 -p 1-1024,3000-4000 -n 8
    python porthawk.py ::1 --all-ports --timeout 500 -o results.txt
"""

from porthawk.main import run

if __name__ == "__main__":
    run()
