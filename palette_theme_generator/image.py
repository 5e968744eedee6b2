import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import RGB, rgb_to_hex

THUMBNAIL_SIZE = (300, 300)
# Pixels this close to pure black or white carry no hue worth seeding from
MIN_CHANNEL_SUM = 30
MAX_CHANNEL_SUM = 735


def extract_dominant_colors(image_path, n_colors=5):
    """Extract dominant colors using k-means clustering

    Returns:
        list of hex strings, most populous cluster first
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail(THUMBNAIL_SIZE)
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    sums = pixels.sum(axis=1)
    filtered_pixels = pixels[(sums > MIN_CHANNEL_SUM) & (sums < MAX_CHANNEL_SUM)]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    counts = np.bincount(kmeans.labels_, minlength=n_clusters)
    colors = []
    for index in np.argsort(-counts, kind="stable"):
        r, g, b = kmeans.cluster_centers_[index]
        colors.append(rgb_to_hex(RGB(r, g, b)))
    return colors


def dominant_color(image_path):
    """Hex of the most common color in an image."""
    return extract_dominant_colors(image_path, n_colors=5)[0]
