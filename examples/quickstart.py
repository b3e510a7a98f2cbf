"""
Atlasmith Quick Start Example

This example shows the basic usage of Atlasmith to pack a folder of textures.
"""

from atlasmith import AtlasBuilder

# Default bounds: 256x256 up to 1024x1024
builder = AtlasBuilder()

print("Packing textures/ ...")
result = builder.build("textures", "output/atlas.png")

for output in result.outputs:
    page = output.page
    print(f"✅ Page {page.number}: {page.width}x{page.height}, {len(page.placements)} textures -> {output.image_path}")

if result.skipped:
    print(f"\nSkipped {len(result.skipped)} unreadable file(s): {', '.join(result.skipped)}")

print("\nDone! Check the output/ directory for your atlases and manifests.")
