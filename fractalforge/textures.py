"""Texture and framebuffer descriptions used by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class TextureFormat(IntEnum):
    NONE = 0
    # Colour formats
    R8 = 1
    RGB8 = 2
    RGBA8 = 3
    RGBA16F = 4
    # Depth/stencil format
    DEPTH24_STENCIL8 = 5


class TextureFilter(IntEnum):
    NONE = 0
    NEAREST = 1
    LINEAR = 2
    NEAREST_MIPMAP_NEAREST = 3
    LINEAR_MIPMAP_NEAREST = 4
    NEAREST_MIPMAP_LINEAR = 5
    LINEAR_MIPMAP_LINEAR = 6


class TextureWrap(IntEnum):
    NONE = 0
    REPEAT = 1
    CLAMP_TO_EDGE = 2
    CLAMP_TO_BORDER = 3


class DepthFunction(Enum):
    LESS = "less"  # draw if the new pixel is closer
    LEQUAL = "lequal"  # draw if closer or at the same depth


@dataclass
class TextureSpecification:
    """Size, storage format and sampling options of a texture."""

    width: int = 1
    height: int = 1
    format: TextureFormat = TextureFormat.RGBA8
    min_filter: TextureFilter = TextureFilter.LINEAR_MIPMAP_LINEAR
    mag_filter: TextureFilter = TextureFilter.LINEAR
    wrap_s: TextureWrap = TextureWrap.REPEAT
    wrap_t: TextureWrap = TextureWrap.REPEAT
    generate_mips: bool = True


@dataclass
class FramebufferSpecification:
    """Size of a framebuffer and the textures attached to it."""

    width: int = 0
    height: int = 0
    color_attachment: TextureSpecification = field(default_factory=TextureSpecification)
    depth_attachment: TextureSpecification = field(default_factory=TextureSpecification)
    has_depth_attachment: bool = False

    def resize(self, width: int, height: int) -> bool:
        """Set a new size; a zero width or height is ignored. Return whether it changed."""
        if width == 0 or height == 0:
            return False
        self.width = width
        self.height = height
        return True

    def attachment_specifications(
        self,
    ) -> tuple[TextureSpecification | None, TextureSpecification | None]:
        """Return the colour and depth attachments to create, sized to the framebuffer.

        The colour attachment is absent when its format is NONE, the depth
        attachment when the framebuffer has none.
        """
        color = None
        depth = None
        if self.color_attachment.format != TextureFormat.NONE:
            self.color_attachment.width = self.width
            self.color_attachment.height = self.height
            color = self.color_attachment
        if self.has_depth_attachment:
            self.depth_attachment.width = self.width
            self.depth_attachment.height = self.height
            depth = self.depth_attachment
        return color, depth