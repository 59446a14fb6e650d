#!/usr/bin/env python3
"""
Analyze a Voyage summary screenshot.

Usage:
    # Analyze a local screenshot
    python scripts/analyze_voyage.py --image path/to/voyage.png

    # Analyze a screenshot by URL
    python scripts/analyze_voyage.py --url https://example.com/voyage.png

    # Use a different asset folder (expects data/*.png and data/tessdata)
    python scripts/analyze_voyage.py --image voyage.png --trainpath ../../../

    # Print the raw JSON document only
    python scripts/analyze_voyage.py --image voyage.png --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


def main():
    parser = argparse.ArgumentParser(description='Voyage Screenshot Analysis')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--image', '-i', type=str, help='Path to screenshot image')
    source.add_argument('--url', '-u', type=str, help='URL of screenshot image')
    parser.add_argument('--trainpath', '-t', type=str,
                       help='Folder containing data/ with reference icons and tessdata')
    parser.add_argument('--config', '-c', type=str, help='JSON file with scanner settings')
    parser.add_argument('--backend', choices=['tesseract', 'paddle'],
                       help='OCR backend (default: tesseract)')
    parser.add_argument('--layout', type=str, help='Screen layout version (default: v1)')
    parser.add_argument('--force', '-f', action='store_true',
                       help='Force reloading of all assets')
    parser.add_argument('--json', action='store_true', help='Print JSON document only')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    from voyage_scan import ScannerConfig, VoyImageScanner

    config = ScannerConfig.from_json(args.config).with_overrides(
        base_path=args.trainpath,
        ocr_backend=args.backend,
        layout_version=args.layout,
    )

    scanner = VoyImageScanner(config)
    if not scanner.reinitialize(args.force):
        print("Could not initialize the voyage scanner.", file=sys.stderr)
        print(f"Check {config.icons_dir} and {config.tessdata_dir}", file=sys.stderr)
        return 1

    if not args.json:
        print("Ready!")

    with scanner:
        result = scanner.analyze(args.image or args.url)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result(result)

    return 0 if result.valid else 2


def print_result(result):
    """Print a readable summary of a VoyageResult."""
    print("\n" + "=" * 50)
    print("VOYAGE")
    print("=" * 50)

    print(f"\nInput: {result.input_width}x{result.input_height} ({result.file_size} bytes)")
    if not result.valid:
        print(f"Error: {result.error}")

    print(f"\nAntimatter: {result.antimatter}")
    print("\nSkills:")
    for name, entry in result.skills.items():
        print(f"  {name.upper()}: {entry.value:5d}  {entry.marker.name.lower()}")

    print("\n" + "=" * 50)


if __name__ == '__main__':
    sys.exit(main())
