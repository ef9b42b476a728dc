#!/usr/bin/env python3
"""devcard — terminal business card.  Run with:  python3 start.py"""
import os
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir    = os.path.join(script_dir, "src")

sys.path.insert(0, src_dir)
os.chdir(script_dir)

from devcard.cli import main
main()
