"""A networked voxel game: chunked block world, player server and OpenGL client."""

__version__ = "0.1.0"