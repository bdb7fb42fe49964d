#!/usr/bin/env python
"""
Slit-scan CLI - Turn an animated GIF into a slit-scan composite and stripe mask

Usage:
    slitscan <input.gif> [options]

Examples:
    slitscan walk.gif                        # 5px slits across 8 frames
    slitscan walk.gif -w 2 -f 5              # Narrow slits across 5 frames
    slitscan walk.gif --spacing 15 -f 4      # Override the derived spacing
    slitscan walk.gif --preset bold          # Use a named preset
    slitscan walk.gif --json > result.json   # Base64 PNG payload on stdout
"""

import argparse
import json
import logging
import sys
from pathlib import Path


DEFAULT_SLIT_WIDTH = 5
DEFAULT_FRAME_COUNT = 8


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='slitscan',
        description="Turn an animated GIF into a slit-scan composite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each sampled frame keeps one band of columns every (width + spacing) pixels,
shifted right by width * frame index. The bands are painted on top of each
other into the composite, and the mask marks where the first frame's bands sit.

Examples:
  %(prog)s walk.gif                          # Defaults: -w 5 -f 8
  %(prog)s walk.gif -w 2 -f 5 -o out.png     # Custom slits and output path
  %(prog)s walk.gif --frames-dir frames/     # Also dump every masked frame
  %(prog)s --list-presets                    # Show all presets
  %(prog)s --preset-info tiled               # Show preset details
        """
    )

    parser.add_argument(
        'input',
        type=str,
        nargs='?',  # Optional for --list-presets and --preset-info
        default=None,
        help='Input animated GIF'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Composite PNG path (default: <input>_combined.png)'
    )

    parser.add_argument(
        '-m', '--mask',
        type=str,
        default=None,
        help='Stripe mask PNG path (default: <input>_mask.png)'
    )

    parser.add_argument(
        '-w', '--slit-width',
        type=int,
        default=None,
        help=f'Width of each visible band in pixels (default: {DEFAULT_SLIT_WIDTH})'
    )

    parser.add_argument(
        '-f', '--frames',
        type=int,
        default=None,
        help=f'Number of frames to sample (default: {DEFAULT_FRAME_COUNT})'
    )

    parser.add_argument(
        '--spacing',
        type=int,
        default=None,
        help='Gap between bands in pixels (default: frames * slit width)'
    )

    parser.add_argument(
        '--frames-dir',
        type=str,
        default=None,
        metavar='DIR',
        help='Also write each masked frame to DIR as frame_NNN.png'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help="Print a JSON payload with base64 PNGs instead of writing files "
             "(not allowed with -o, -m or --frames-dir)"
    )

    parser.add_argument(
        '--preset',
        type=str,
        default=None,
        metavar='NAME',
        help='Use a preset slit geometry (explicit flags still win)'
    )

    parser.add_argument(
        '--list-presets',
        action='store_true',
        help='List all available presets and exit'
    )

    parser.add_argument(
        '--preset-info',
        type=str,
        default=None,
        metavar='NAME',
        help='Show detailed info about a preset and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug logging'
    )

    return parser


def _list_presets() -> None:
    from .core.presets import get_preset_manager

    manager = get_preset_manager()

    print("Available Slit Presets:\n")
    for name in manager.list_all():
        preset = manager.get(name)
        desc = preset.description[:50] + "..." if len(preset.description) > 50 else preset.description
        print(f"    {name:<12} - {desc}")

    print(f"\nTotal: {len(manager.list_all())} presets")
    print("\nUsage: --preset <name>")
    print("Details: --preset-info <name>")


def _preset_info(name: str) -> int:
    from .core.presets import get_preset

    preset = get_preset(name)
    if not preset:
        print(f"Error: Preset '{name}' not found")
        print("Use --list-presets to see available presets")
        return 1

    from .core.errors import InvalidParameterError

    try:
        params = preset.to_parameters()
    except InvalidParameterError as e:
        print(f"Error: Preset '{name}' is invalid: {e}")
        return 1

    print(f"Preset: {preset.name}")
    print(f"Description: {preset.description}")
    print("\nSettings:")
    print(f"  Slit width: {params.slit_width}")
    print(f"  Frames: {params.frame_count}")
    spacing_note = "" if preset.slit_spacing is not None else " (derived)"
    print(f"  Spacing: {params.slit_spacing}{spacing_note}")
    if preset.tags:
        print(f"\nTags: {', '.join(preset.tags)}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.list_presets:
        _list_presets()
        return 0

    if args.preset_info:
        return _preset_info(args.preset_info)

    # Check input is provided (required unless listing presets)
    if not args.input:
        print("Error: Input file is required")
        print("Usage: slitscan <input.gif> [options]")
        print("       slitscan --list-presets")
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    slit_width = DEFAULT_SLIT_WIDTH
    frame_count = DEFAULT_FRAME_COUNT
    spacing = None

    if args.preset:
        from .core.presets import get_preset
        preset = get_preset(args.preset)
        if not preset:
            print(f"Error: Preset '{args.preset}' not found")
            print("Use --list-presets to see available presets")
            return 1
        if not args.json:
            print(f"Using preset: {args.preset} ({preset.description})")
        slit_width = preset.slit_width
        frame_count = preset.frame_count
        spacing = preset.slit_spacing

    if args.slit_width is not None:
        slit_width = args.slit_width
    if args.frames is not None:
        frame_count = args.frames
    if args.spacing is not None:
        spacing = args.spacing

    if args.json and (args.output or args.mask or args.frames_dir):
        print("Error: --json writes nothing to disk; drop -o, -m and --frames-dir")
        return 1

    # Import here to avoid slow startup for --help
    from . import process, render
    from .core import SlitScanExporter

    try:
        if args.json:
            result = process(input_path.read_bytes(), slit_width, frame_count, spacing)
            print(json.dumps(SlitScanExporter.to_payload(result)))
            return 0

        print(f"Processing: {args.input}")
        outputs = render(
            str(input_path),
            output_path=args.output,
            mask_path=args.mask,
            slit_width=slit_width,
            frame_count=frame_count,
            slit_spacing=spacing,
            frames_dir=args.frames_dir,
        )
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if outputs['frames']:
        print(f"All frames processed and saved to {args.frames_dir}")
    print(f"Combined image saved to {outputs['composite']}")
    print(f"Stripe mask saved to {outputs['mask']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
