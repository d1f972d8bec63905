"""
Sprite Atlas Viewer
Main entry point for the application

Loads a TexturePacker JSON atlas and its sheet image and plays the frames
back as an animation with scrubbing, stepping and frame-rate control.
"""

import argparse
import sys
from PyQt6.QtWidgets import QApplication
from ui.main_window import AtlasViewerWindow


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Preview TexturePacker sprite atlases")
    parser.add_argument('image', nargs='?', help="Atlas sheet image")
    parser.add_argument('manifest', nargs='?', help="TexturePacker JSON manifest")
    args, qt_args = parser.parse_known_args()

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    
    window = AtlasViewerWindow()
    window.show()
    if args.image and args.manifest:
        window.load_atlas_files(args.image, args.manifest)
    
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
