"""
Byte Filter Studio
Saturating byte-buffer filters for packed pixel data
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)


def _parse_value(text: str):
    """Integers in decimal or 0x/0b form, everything else as a string."""
    try:
        return int(text, 0)
    except ValueError:
        return text


def _parse_options(args):
    options = {}
    for arg in args:
        if '=' not in arg:
            raise ValueError(f"Expected key=value, got {arg!r}")
        key, value = arg.split('=', 1)
        if key == 'kernel':
            options[key] = [int(v, 0) for v in value.split(',')]
        else:
            options[key] = _parse_value(value)
    return options


def print_filters():
    """List registered filters by family."""
    from engines.registry import list_filters
    from utils.constants import FAMILIES

    for family in FAMILIES:
        print(f"[{family}]")
        for info in list_filters(family):
            options = ' '.join(f"{o}=" for o in info.options)
            print(f"  {info.name} {options}".rstrip())


def run_cli(argv):
    """Apply one filter to an image file or a synthetic buffer."""
    from models.filter_params import FilterParams
    from engines.pipeline import apply_filter
    from utils.test_images import generate_gradient, generate_noise
    from utils.image_io import load_image, save_image

    args = list(argv)
    if '--verbose' in args:
        args.remove('--verbose')
        logging.getLogger().setLevel(logging.DEBUG)

    second_path = None
    if '--second' in args:
        idx = args.index('--second')
        second_path = args[idx + 1]
        del args[idx:idx + 2]

    if not args or args[0] in ('--help', '-h'):
        print("Usage: python main.py <filter> <image_path> [output_path] [key=value ...]")
        print("       python main.py <filter> --synthetic [key=value ...]")
        print("       python main.py --list")
        print("Options: --second <path>  second source for dual-source filters")
        print("         --verbose        debug logging")
        return 0

    if args[0] == '--list':
        print_filters()
        return 0

    name = args[0]
    rest = args[1:]
    if not rest:
        print("Missing input image (or --synthetic)")
        return 2

    output_path = None
    if rest[0] == '--synthetic':
        print("Generating test buffer...")
        image = generate_gradient(64, 256)
        second = generate_noise(64, 256) if second_path is None else load_image(second_path)
        rest = rest[1:]
    else:
        print(f"Loading: {rest[0]}")
        image = load_image(rest[0])
        second = load_image(second_path) if second_path else None
        rest = rest[1:]
        if rest and '=' not in rest[0]:
            output_path = rest[0]
            rest = rest[1:]

    params = FilterParams(name=name, options=_parse_options(rest))
    if params.family != 'dual':
        second = None

    print(f"Image: {image.columns}x{image.rows}, {image.bpp} byte(s) per pixel")
    print(f"Filter: {params.name} {params.options}")

    result = apply_filter(params, image, second)

    print("\n=== Results ===")
    print(f"Success:   {result.success}")
    print(f"Time:      {result.elapsed_ms:.3f} ms")
    if not result.success:
        return 1
    print(f"PSNR:      {result.psnr:.2f} dB")

    if output_path:
        save_image(result.output, output_path)
        print(f"\nSaved: {output_path}")
    return 0


def main():
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s %(name)s: %(message)s')
    try:
        sys.exit(run_cli(sys.argv[1:]))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(2)


if __name__ == '__main__':
    main()
