"""
Wavelet Compress Studio
Haar wavelet / DCT lossy compression of 2D arrays
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py <image_path> [level] [threshold] [--dct] [--verbose]
       python main.py --synthetic [level] [threshold] [--dct] [--verbose]
       python main.py --spectrogram [level] [threshold] [--dct] [--verbose]"""


def run_cli(argv):
    """Compress and reconstruct one array, print metrics."""
    from models.compression_params import CompressionParams
    from engines.pipeline import compress_reconstruct
    from utils.constants import DEFAULT_LEVEL, DEFAULT_THRESHOLD
    from utils.test_images import generate_checkerboard, generate_spectrogram
    from utils.image_io import load_grayscale, save_grayscale

    flags = {a for a in argv if a.startswith('--')}
    args = [a for a in argv if not a.startswith('--')]

    if '--help' in flags or (not args and not flags & {'--synthetic', '--spectrogram'}):
        print(USAGE)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if '--verbose' in flags else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    if '--synthetic' in flags:
        print("Generating checkerboard...")
        data = generate_checkerboard(256)
    elif '--spectrogram' in flags:
        print("Generating chirp spectrogram...")
        data = generate_spectrogram()
    else:
        image_path = args.pop(0)
        print(f"Loading: {image_path}")
        data = load_grayscale(image_path)

    level = int(args[0]) if len(args) > 0 else DEFAULT_LEVEL
    threshold = float(args[1]) if len(args) > 1 else DEFAULT_THRESHOLD
    transform = 'dct' if '--dct' in flags else 'haar'

    print(f"Array: {data.shape[1]}x{data.shape[0]}")
    print(f"Transform: {transform}, level: {level}, threshold: {threshold}")

    params = CompressionParams(transform=transform, level=level, threshold=threshold)
    result, _ = compress_reconstruct(data, params)

    print("\n=== Results ===")
    print(f"PSNR:      {result.psnr:.2f} dB")
    print(f"SSIM:      {result.ssim:.4f}")
    print(f"Max error: {result.max_error:.3f}")
    print(f"Zeroed:    {100.0 * result.sparsity:.1f}% of {result.total_coeffs} coefficients")
    print(f"Ratio:     {result.compression_ratio:.2f}:1 ({result.ratio_label})")
    if transform == 'haar':
        print(f"Levels:    {result.levels_applied} of {level}")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")

    if '--spectrogram' not in flags:
        save_grayscale(result.reconstructed, "reconstructed.png")
        print("\nSaved: reconstructed.png")
    return 0


def main():
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == '__main__':
    main()
