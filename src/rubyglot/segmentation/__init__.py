"""Word segmentation."""

from rubyglot.segmentation.segmenter import LocaleSegmenter, Segment, WordSegmenter

__all__ = ["LocaleSegmenter", "Segment", "WordSegmenter"]
