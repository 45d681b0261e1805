"""
DCT Component Studio
Block DCT coefficient masking and basis image previews for greyscale images
"""

import argparse
import sys


def parse_coefficient(text: str) -> tuple:
    """Parse 'row,col' into a coefficient index."""
    try:
        row, col = (int(part) for part in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got '{text}'")
    return row, col


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Mask block DCT coefficients of a greyscale image and preview the result',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in sample, 8x8 blocks, keep only the 3x3 lowest frequencies
  python main.py --size 8 --low-pass 3 --output lowpass.png

  # Drop the DC term of a 4x4 transform on a photo
  python main.py photo.jpg --size 4 --drop 0,0 --output no_dc.png

  # Export the 64 basis images for N=8
  python main.py --size 8 --components components.png
        """
    )

    parser.add_argument('image', nargs='?',
                        help='Input PNG/JPG (built-in sample if omitted)')
    parser.add_argument('--sample', default='scene',
                        help='Built-in sample key when no image is given (default: scene)')
    parser.add_argument('--size', '-n', type=int, default=None,
                        help='Transform size N')
    parser.add_argument('--keep', type=parse_coefficient, nargs='+', default=None,
                        help='Keep only these coefficients (row,col ...)')
    parser.add_argument('--drop', type=parse_coefficient, nargs='+', default=None,
                        help='Drop these coefficients (row,col ...)')
    parser.add_argument('--low-pass', type=int, default=None, metavar='K',
                        help='Keep only coefficients with row < K and col < K')
    parser.add_argument('--output', '-o', help='Write the reconstruction here')
    parser.add_argument('--components', help='Write the basis image grid here')
    parser.add_argument('--compare', help='Write an original/reconstruction figure here')
    parser.add_argument('--mosaic', help='Write the basis images as one pixel-exact image here')
    return parser


def build_mask(args, block_size: int):
    from models.coefficient_mask import CoefficientMask

    if args.keep is not None:
        mask = CoefficientMask.all_off(block_size)
        mask.set_entries({index: True for index in args.keep})
    else:
        mask = CoefficientMask.all_on(block_size)

    if args.low_pass is not None:
        mask.set_entries({
            (row, col): False
            for row in range(block_size)
            for col in range(block_size)
            if row >= args.low_pass or col >= args.low_pass
        })

    if args.drop is not None:
        mask.set_entries({index: False for index in args.drop})

    return mask


def run_cli(argv=None) -> int:
    from engines.session import DCTFilterSession
    from utils.constants import DEFAULT_BLOCK_SIZE
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_sample_image
    from utils.metrics import compute_psnr_ssim

    args = build_parser().parse_args(argv)
    block_size = args.size if args.size is not None else DEFAULT_BLOCK_SIZE

    try:
        if args.image:
            print(f"Loading: {args.image}")
            image = load_image(args.image)
        else:
            print(f"Generating sample image: {args.sample}")
            image = generate_sample_image(args.sample)

        session = DCTFilterSession(block_size=block_size, image=image)
        mask = build_mask(args, session.block_size)
        reconstructed = session.set_mask(mask)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    metrics = compute_psnr_ssim(session.image, reconstructed)

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Block size: {session.block_size}")
    print(f"Retained:   {mask.retained_count()}/{session.block_size ** 2} coefficients")
    print(f"PSNR:       {metrics['psnr']:.2f} dB")
    print(f"SSIM:       {metrics['ssim']:.4f}")

    try:
        if args.output:
            save_image(reconstructed, args.output)
            print(f"Saved: {args.output}")
        if args.components:
            from utils.plotting import save_component_grid
            save_component_grid(session.components, args.components,
                                title=f"{session.block_size}-point DCT components")
            print(f"Saved: {args.components}")
        if args.compare:
            from utils.plotting import save_comparison
            save_comparison(session.image, reconstructed, args.compare,
                            mask=mask.as_array(), title=f"N={session.block_size}")
            print(f"Saved: {args.compare}")
        if args.mosaic:
            from engines.basis_renderer import component_mosaic
            save_image(component_mosaic(session.components), args.mosaic)
            print(f"Saved: {args.mosaic}")
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
