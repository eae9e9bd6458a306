#!/usr/bin/env python3
"""
sigpatch - Binary Patcher

Applies a patch set (signature/replacement pairs) to a binary file.

Each patch searches the whole file for its signature and rewrites every
match in place. Patches run in ascending "order" and see the effects of
earlier patches. The input file is never modified.
"""

import argparse
import logging
import sys

from sigpatch import __version__
from sigpatch.core.binary_file import BinaryFile
from sigpatch.core.errors import PatchError
from sigpatch.core.patch_sequence import PatchResult, PatchSequence
from sigpatch.formats.patch_set import PatchSet, load_patch_set

logger = logging.getLogger("sigpatch")


def list_patches(patch_set: PatchSet) -> None:
    """Print the patches in a set, in run order."""
    print(f"Patches in '{patch_set.name}':")
    print()
    for patch in patch_set.patches:
        print(f"  [{patch.order}] {patch.name}")
        if patch.description:
            print(f"    {patch.description}")
        print(f"    pattern: {patch.search}")
        print(f"    patch:   {patch.replacement}")
        print()


def report_results(results: list[PatchResult], verbose: bool) -> None:
    """Print match counts (and offsets when verbose) for each patch."""
    print()
    print("Results:")
    for result in results:
        print(f"  {result.name}: {result.count} match(es)")
        if verbose:
            for offset in result.offsets:
                print(f"    0x{offset:08X}")

    total = sum(result.count for result in results)
    print(f"Total: {total} location(s) patched")


def run_patches(
    config_path: str,
    input_path: str,
    output_path: str | None,
    dry_run: bool,
    verbose: bool,
) -> list[PatchResult]:
    """
    Load a patch set, apply it to a binary, and save the result.

    Args:
        config_path: Patch set file
        input_path: Binary to patch (read-only)
        output_path: Output file (default: <input>_patched)
        dry_run: Apply in memory and report without saving
        verbose: Show match offsets

    Returns:
        Per-patch results
    """
    patch_set = load_patch_set(config_path)
    logger.info("Using config: %s", patch_set.name)

    logger.info("Transforming file: %s", input_path)
    binary = BinaryFile.from_file(input_path, output_path)

    sequence = PatchSequence(binary.data).load(patch_set)
    results = sequence.run()

    report_results(results, verbose)

    if dry_run:
        print()
        print("Dry run - output not written")
    else:
        binary.save()

    return results


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Apply signature patches to a binary file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Patch app.exe, writing app.exe_patched next to it
  python tools/patch.py -c patches.toml -i app.exe

  # Choose the output file
  python tools/patch.py -c patches.toml -i app.exe -o app_fixed.exe

  # See what would be patched without writing anything
  python tools/patch.py -c patches.toml -i app.exe --dry-run --verbose
""",
    )

    parser.add_argument("-c", "--config", required=True, help="Patch set file (.toml, .yml, .json)")
    parser.add_argument("-i", "--input", help="Binary file to patch (read-only)")
    parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: <input>_patched)",
        default=None,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Apply patches in memory and report without writing",
    )
    parser.add_argument(
        "--list-patches",
        action="store_true",
        help="List the patches in the patch set and exit",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show match offsets and debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(message)s",
    )
    logger.info("version: v%s", __version__)

    try:
        # Handle --list-patches early exit
        if args.list_patches:
            list_patches(load_patch_set(args.config))
            sys.exit(0)

        if not args.input:
            parser.error("the following arguments are required: -i/--input")

        run_patches(args.config, args.input, args.output, args.dry_run, args.verbose)

    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except PatchError as e:
        print(f"Patch error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
