"""
Core modules for the image compositor: pixel buffers, codecs, enums,
constants and the error hierarchy.
"""
