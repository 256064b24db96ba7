"""pastelaria — administrative backend for a food-service business."""

__version__ = "0.1.0"
