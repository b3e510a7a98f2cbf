"""
Atlasmith Advanced Example

This example packs rectangles without any image files, inspects the pages,
and writes only the manifests.
"""

from atlasmith import PackConfig, RectRecord, pack
from atlasmith.manifest import format_manifest, page_output_paths, write_manifest

config = PackConfig(min_width=64, min_height=64, max_width=512, max_height=512)

# Sprite sizes known up front, e.g. from a sprite sheet description
sizes = [(200, 120), (120, 200), (64, 64), (300, 40), (40, 300)] * 3
records = [RectRecord(id=f"sprite_{i}", width=w, height=h) for i, (w, h) in enumerate(sizes)]

pages = pack(records, config)

print(f"--- {len(records)} sprites on {len(pages)} page(s) ---")
for page in pages:
    print(f"\nPage {page.number}: {page.width}x{page.height}, fill {page.fill_rate:.1%}")
    print(format_manifest(page), end="")

    _, manifest_path = page_output_paths("output/sprites.png", page.number)
    write_manifest(page, manifest_path)
    print(f"✅ Saved {manifest_path}")
