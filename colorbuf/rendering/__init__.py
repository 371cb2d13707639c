from .image import DEFAULT_ORDER, buffer_to_image, image_to_buffer, load_bitmap, save_buffer

__all__ = ["DEFAULT_ORDER", "buffer_to_image", "image_to_buffer", "load_bitmap", "save_buffer"]
