"""
Subtitle format handlers, discovered and registered by the SubtitleFormatRegistry
"""
