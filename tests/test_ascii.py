from unplugged.providers import ManualWeatherProvider
from unplugged.renderers import ArtRenderer, ASCIIRenderer


def make_preview(monkeypatch, colorterm="", width=8, height=4):
    monkeypatch.setenv("COLORTERM", colorterm)
    renderer = ArtRenderer(width=40, height=20, seed=1, quiet=True)
    return ASCIIRenderer(width=width, height=height, art_renderer=renderer)


def test_preview_shape(monkeypatch):
    preview = make_preview(monkeypatch)
    lines = preview.render(ManualWeatherProvider().get_data()).split("\n")

    assert len(lines) == 2
    for line in lines:
        assert line.count(ASCIIRenderer.LOWER_HALF_BLOCK) == 8
        assert line.endswith(ASCIIRenderer.RESET)
        assert "\033[48;5;" in line


def test_true_color_preview(monkeypatch):
    preview = make_preview(monkeypatch, colorterm="truecolor")
    assert preview.true_color
    assert "\033[48;2;" in preview.render(ManualWeatherProvider().get_data())


def test_odd_height(monkeypatch):
    preview = make_preview(monkeypatch, height=3)
    assert len(preview.render(ManualWeatherProvider().get_data()).split("\n")) == 2


def test_rgb_to_256(monkeypatch):
    preview = make_preview(monkeypatch)
    assert preview._rgb_to_256((0, 0, 0)) == 16
    assert preview._rgb_to_256((255, 255, 255)) == 231
    assert preview._rgb_to_256((255, 0, 0)) == 196
    assert 232 <= preview._rgb_to_256((128, 128, 128)) <= 255


def test_render_frame_title(monkeypatch):
    preview = make_preview(monkeypatch)
    frame = preview.render_frame(ManualWeatherProvider().get_data(), title="Rain")
    lines = frame.split("\n")
    assert lines[1].strip() == "Rain"
    assert lines[2] == "=" * 8
