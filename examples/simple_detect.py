"""
Simple example of checking one image for a Ricoh GR camera
"""

import sys
from pathlib import Path
from grcam_core import CameraModel, DetectorConfig, detect_from_filename_only, detect_from_source


def main():
    image_path = Path(sys.argv[1] if len(sys.argv) > 1 else "R0001234.JPG")

    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Filename-only check instead:")
        print(f"  {detect_from_filename_only(image_path.name)}")
        return

    print(f"Checking {image_path}...")
    print("-" * 60)

    errors = []
    config = DetectorConfig(on_error=errors.append)
    result = detect_from_source(image_path.read_bytes(), filename=image_path.name, config=config)

    if result.is_match:
        print("✓ GR camera\n")
        if result.model:
            print(f"Model:          {result.model.display_name}")
            print(f"HDF:            {result.model.has_filter_option}")
            print(f"Monochrome:     {result.model.is_monochrome}")
        print(f"Method:         {result.method.value}")
        print(f"Confirmed:      {result.is_confirmed}")
        if result.camera_make:
            print(f"EXIF:           {result.camera_make} / {result.camera_model}")
    else:
        print("✗ Not a GR camera")

    for error in errors:
        print(f"\nWarning: {error}")

    print("\nKnown models:")
    for model in CameraModel.known():
        flags = []
        if model.has_filter_option:
            flags.append("HDF")
        if model.is_monochrome:
            flags.append("Mono")
        suffix = f" ({', '.join(flags)})" if flags else ""
        print(f"  - {model.display_name}{suffix}")


if __name__ == "__main__":
    main()
