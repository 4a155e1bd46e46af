#!/usr/bin/env python3
"""Build script for Xfer Time.

Creates a distributable package using PyInstaller.

Usage:
    python build.py          # Full build
    python build.py --clean  # Clean build artifacts only
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

APP_NAME = "XferTime"


def check_deps():
    """Verify build dependencies are installed."""
    missing = []
    for mod in ['PyInstaller', 'PyQt6']:
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)
    if missing:
        print(f"Missing dependencies: {', '.join(missing)}")
        print("Install with: pip install -e .[build]")
        return False
    return True


def clean():
    """Remove build artifacts."""
    for d in ['build', 'dist', '__pycache__']:
        if os.path.isdir(d):
            shutil.rmtree(d)
            print(f"  Removed {d}/")
    for f in Path('.').glob('*.spec'):
        f.unlink()
        print(f"  Removed {f}")


def build():
    """Run PyInstaller build."""
    if not check_deps():
        sys.exit(1)

    print("=== Xfer Time Build ===\n")

    print("[1/3] Checking dependencies...")
    import PyQt6.QtCore
    print(f"  PyQt6: {PyQt6.QtCore.PYQT_VERSION_STR}")

    print("\n[2/3] Running PyInstaller...")
    result = subprocess.run([
        sys.executable, '-m', 'PyInstaller',
        '--name', APP_NAME,
        '--windowed',
        '--noconfirm',
        '--paths', '.',
        str(Path('xfertime') / '__main__.py'),
    ], capture_output=False)

    if result.returncode != 0:
        print("\nBuild FAILED!")
        sys.exit(1)

    print("\n[3/3] Build complete!")
    dist_dir = Path('dist') / APP_NAME
    if dist_dir.exists():
        total = sum(f.stat().st_size for f in dist_dir.rglob('*') if f.is_file())
        print(f"  Output: {dist_dir}")
        print(f"  Total size: {total / (1024 * 1024):.1f} MB")
    else:
        print("  Output directory not found - check for errors above.")


if __name__ == '__main__':
    os.chdir(Path(__file__).parent)
    if '--clean' in sys.argv:
        print("Cleaning build artifacts...")
        clean()
        print("Done.")
    else:
        build()
