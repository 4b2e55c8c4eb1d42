"""
Example of finding GR photos in a directory
"""

from pathlib import Path
from grcam_core import batch_detect


IMAGE_SUFFIXES = {".jpg", ".jpeg", ".dng", ".raf", ".tif", ".tiff"}


def main():
    photo_dir = Path("./photos")

    if not photo_dir.exists():
        print(f"Error: Directory {photo_dir} not found")
        print("Please create a 'photos' directory with some images")
        return

    images = sorted(p for p in photo_dir.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES)

    if not images:
        print(f"No images found in {photo_dir}")
        return

    print(f"Found {len(images)} images")
    print("=" * 60)

    def on_progress(current, total, result):
        name = images[current - 1].name
        if result.is_match:
            model = result.model.display_name if result.model else "model unknown"
            print(f"[{current}/{total}] ✓ {name} ({model}, via {result.method.value})")
        elif result.has_error:
            print(f"[{current}/{total}] ✗ {name}: {result.error}")
        else:
            print(f"[{current}/{total}]   {name}")

    results = batch_detect(
        ((p.read_bytes(), p.name) for p in images),
        progress_callback=on_progress,
    )

    # Summary
    print("=" * 60)
    matches = [r for r in results if r.is_match]
    confirmed = [r for r in matches if r.is_confirmed]
    errors = [r for r in results if r.has_error]

    print(f"\nResults:")
    print(f"  GR photos:  {len(matches)} ({len(confirmed)} confirmed by EXIF)")
    print(f"  Other:      {len(results) - len(matches)}")
    print(f"  EXIF issues: {len(errors)}")

    models = {r.model.display_name for r in matches if r.model}
    if models:
        print(f"\nModels found:")
        for model in sorted(models):
            print(f"  - {model}")


if __name__ == "__main__":
    main()
