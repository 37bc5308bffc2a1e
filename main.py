"""
Raster Filter Lab
Elementary filters (fill, gradient, red shift, blur, rotation) on an RGB raster
"""

import sys


def _parse_shift(args, index):
    """Red shift amount at args[index], or the default when absent."""
    from utils.constants import DEFAULT_RED_SHIFT
    if len(args) <= index:
        return DEFAULT_RED_SHIFT
    try:
        return int(args[index])
    except ValueError:
        print(f"Error: red shift must be an integer, got {args[index]!r}")
        print("Usage: python main.py [image_path [shift]] [--fit]")
        sys.exit(1)


def run_gui(args):
    """Launch the GUI application."""
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt
    from gui.main_window import MainWindow, APP_NAME, APP_VERSION
    from models.errors import DecodeError
    from utils.image_io import load_image
    from utils.test_images import generate_colored_checkerboard

    fit = '--fit' in args
    args = [a for a in args if a != '--fit']

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setStyle("Fusion")

    window = MainWindow(shift_amount=_parse_shift(args, 1), fit=fit)
    if args:
        try:
            image = load_image(args[0], fit=fit)
        except DecodeError as e:
            print(f"Error: {e}")
            sys.exit(1)
        window.set_source(image, args[0])
    else:
        window.set_source(generate_colored_checkerboard(), "demo checkerboard")
    window.show()
    sys.exit(app.exec())


def run_cli(args):
    """Run every filter and write the results as PNG files."""
    from engines.pipeline import run_filters
    from models.errors import DecodeError
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_colored_checkerboard

    fit = '--fit' in args
    args = [a for a in args if a != '--fit']

    if not args or args[0] == '--help':
        print("Usage: python main.py --cli <image_path> [shift] [--fit]")
        print("       python main.py --cli --synthetic [shift]")
        print("       python main.py [image_path [shift]] [--fit]")
        sys.exit(0)

    if args[0] == '--synthetic':
        print("Generating test image...")
        image = generate_colored_checkerboard()
    else:
        image_path = args[0]
        print(f"Loading: {image_path}")
        try:
            image = load_image(image_path, fit=fit)
        except DecodeError as e:
            print(f"Error: {e}")
            sys.exit(1)
    shift_amount = _parse_shift(args, 1)

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Red shift: {shift_amount}")

    results = run_filters(image, shift_amount)

    print("\n=== Results ===")
    for result in results:
        filename = f"filtered_{result.label.lower()}.png"
        save_image(result.image, filename)
        print(f"{result.label:<10} {result.elapsed_ms:8.2f} ms  -> {filename}")
    print(f"Total:     {sum(r.elapsed_ms for r in results):8.2f} ms")


def main():
    if len(sys.argv) > 1 and sys.argv[1] == '--cli':
        run_cli(sys.argv[2:])
    else:
        run_gui(sys.argv[1:])


if __name__ == '__main__':
    main()
