"""Instruction text sent to the image model alongside the two images."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from posetransfer.models.sizes import ImageDimensions

# Size used when the caller gives no dimension hint; suits full-body output.
DEFAULT_OUTPUT = (512, 768)

POSE_TRANSFER_INSTRUCTION = """\
Generate a full-body image based on the first image, with the person adopting \
the exact pose shown in the second image (stick figure).

CRITICAL REQUIREMENTS:
1. POSE ACCURACY: The person must match the EXACT pose, body position, limb \
angles, and orientation of the stick figure. Pay special attention to:
   - Arm positions and angles
   - Leg positions and stance
   - Head orientation and tilt
   - Overall body posture and balance

2. FULL BODY GENERATION: Always generate a complete full-body image showing \
the person from head to toe, even if the original image was cropped \
(half-body, portrait, etc.). Extend and complete any missing body parts naturally.

3. PRESERVE IDENTITY: Maintain the original person's:
   - Facial features and appearance
   - Clothing style and colors
   - Hair style and color
   - Body proportions and build

4. BACKGROUND & COMPOSITION:
   - Keep the original background style or create a suitable neutral background
   - Ensure proper lighting and shadows that match the pose
   - Make the composition balanced and natural

5. IMAGE QUALITY: Generate a high-quality, realistic image with proper \
proportions and natural-looking pose transitions.

{dimensions}

Focus on making the pose transfer as accurate as possible while maintaining \
photorealistic quality."""


def build_dimensions_line(dimensions: ImageDimensions | None) -> str:
    if dimensions is None:
        w, h = DEFAULT_OUTPUT
        return f"OUTPUT DIMENSIONS: Generate the image in {w}x{h} pixels for optimal full-body display."
    return (
        f"OUTPUT DIMENSIONS: Generate the image in {dimensions.width}x{dimensions.height} "
        f"pixels ({dimensions.label})."
    )


def build_instruction(dimensions: ImageDimensions | None = None) -> str:
    """Return the full pose-transfer instruction for an optional output size."""
    return POSE_TRANSFER_INSTRUCTION.format(dimensions=build_dimensions_line(dimensions))
