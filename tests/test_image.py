from PIL import Image

from palette_theme_generator.image import dominant_color, extract_dominant_colors


def _two_tone_image(tmp_path):
    img = Image.new("RGB", (100, 40), (0, 0, 255))
    img.paste((255, 0, 0), (0, 0, 70, 40))
    path = tmp_path / "two_tone.png"
    img.save(path)
    return str(path)


def test_extract_orders_by_population(tmp_path):
    path = _two_tone_image(tmp_path)
    assert extract_dominant_colors(path, n_colors=2) == ["#ff0000", "#0000ff"]


def test_dominant_color_with_fewer_distinct_pixels_than_clusters(tmp_path):
    assert dominant_color(_two_tone_image(tmp_path)) == "#ff0000"
