"""Data models."""

from .asset import Asset, AssetContent, AssetFormat, ClassifiedAsset
from .download import DownloadedFile, DownloadResult, FailedDownload
from .layer import Blur, Border, Color, ColorStop, Fill, Gradient, Layer, Rect, Shadow, TextStyle, TextStyleRun
from .layout import LayoutInfo, Padding, SiblingGap
from .screen import Annotation, Link, Screen, ScreenVersion

__all__ = [
    "Annotation",
    "Asset",
    "AssetContent",
    "AssetFormat",
    "Blur",
    "Border",
    "ClassifiedAsset",
    "Color",
    "ColorStop",
    "DownloadedFile",
    "DownloadResult",
    "FailedDownload",
    "Fill",
    "Gradient",
    "Layer",
    "LayoutInfo",
    "Link",
    "Padding",
    "Rect",
    "Screen",
    "ScreenVersion",
    "Shadow",
    "SiblingGap",
    "TextStyle",
    "TextStyleRun",
]
