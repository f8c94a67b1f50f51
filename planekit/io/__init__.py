from planekit.io.json_shapes import dumps, load_shapes, loads, save_shapes, shape_from_dict

__all__ = ["dumps", "loads", "load_shapes", "save_shapes", "shape_from_dict"]
