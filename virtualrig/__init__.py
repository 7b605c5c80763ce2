"""Skeletal animation building blocks: BVH loading, vector and matrix math, dual quaternions and mesh structures."""

__version__ = "0.1.0"