#!/usr/bin/env python3
"""
Code Extractor - Entry point.

Run: python app.py
Run headless: python app.py --headless --input <file.txt> [--output <folder>] [--remove CODE ...]
"""

if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Code Extractor")
    parser.add_argument("--headless", action="store_true", help="Run without GUI")
    parser.add_argument("--input", help="Path to the text file to extract codes from")
    parser.add_argument("--output", help="Output directory (default: ~/Downloads)")
    parser.add_argument(
        "--remove", action="append", metavar="CODE",
        help="Remove every occurrence of CODE before export (repeatable)",
    )
    parser.add_argument("--config", help="Path to settings JSON (default: config/settings.json)")
    args = parser.parse_args()

    if args.headless:
        from code_extractor.main import headless_main
        sys.exit(headless_main(args))
    else:
        from code_extractor.main import main
        main(args.config)
