from fractalforge.textures import (
    DepthFunction,
    FramebufferSpecification,
    TextureFilter,
    TextureFormat,
    TextureSpecification,
    TextureWrap,
)


def test_texture_specification_defaults():
    spec = TextureSpecification()
    assert spec.format is TextureFormat.RGBA8
    assert spec.min_filter is TextureFilter.LINEAR_MIPMAP_LINEAR
    assert spec.mag_filter is TextureFilter.LINEAR
    assert spec.wrap_s is TextureWrap.REPEAT and spec.wrap_t is TextureWrap.REPEAT
    assert spec.generate_mips is True
    assert (spec.width, spec.height) == (1, 1)


def test_none_members_are_zero():
    spec = TextureSpecification(
        format=TextureFormat.NONE,
        min_filter=TextureFilter.NONE,
        wrap_s=TextureWrap.NONE,
    )
    assert int(spec.format) == 0
    assert int(spec.min_filter) == 0
    assert int(spec.wrap_s) == 0


def test_depth_functions_are_distinct():
    members = {DepthFunction(m.value) for m in DepthFunction}
    assert members == {DepthFunction.LESS, DepthFunction.LEQUAL}
    assert len(members) == 2


def test_framebuffer_defaults_have_independent_attachments():
    a = FramebufferSpecification()
    b = FramebufferSpecification()
    a.color_attachment.format = TextureFormat.R8
    assert b.color_attachment.format is TextureFormat.RGBA8
    assert a.has_depth_attachment is False


def test_resize_updates_size():
    spec = FramebufferSpecification(width=10, height=20)
    assert spec.resize(640, 480) is True
    assert (spec.width, spec.height) == (640, 480)


def test_resize_ignores_zero_dimension():
    spec = FramebufferSpecification(width=10, height=20)
    assert spec.resize(0, 480) is False
    assert spec.resize(640, 0) is False
    assert (spec.width, spec.height) == (10, 20)


def test_attachments_are_sized_to_framebuffer():
    spec = FramebufferSpecification(width=800, height=600, has_depth_attachment=True)
    spec.depth_attachment.format = TextureFormat.DEPTH24_STENCIL8
    color, depth = spec.attachment_specifications()
    assert (color.width, color.height) == (800, 600)
    assert (depth.width, depth.height) == (800, 600)
    assert depth.format is TextureFormat.DEPTH24_STENCIL8
    assert spec.color_attachment.width == 800


def test_no_color_attachment_when_format_none():
    spec = FramebufferSpecification(width=32, height=32, has_depth_attachment=True)
    spec.color_attachment.format = TextureFormat.NONE
    color, depth = spec.attachment_specifications()
    assert color is None
    assert depth.width == 32


def test_no_depth_attachment_without_flag():
    spec = FramebufferSpecification(width=32, height=16)
    color, depth = spec.attachment_specifications()
    assert depth is None
    assert (color.width, color.height) == (32, 16)
    assert spec.depth_attachment.width == TextureSpecification().width


def test_resize_then_attachments_follow():
    spec = FramebufferSpecification(width=4, height=4)
    spec.attachment_specifications()
    spec.resize(64, 48)
    color, _ = spec.attachment_specifications()
    assert (color.width, color.height) == (64, 48)