"""
Reformat Go code that appears inside Markdown code fences.

gofencefmt is meant to be run by a text editor on a selected range of text,
with its output replacing the selection. Given

    if true {
    fmt.Println("I am invincible!")
    }

it produces

    if true {
    	fmt.Println("I am invincible!")
    }

The reformatted text keeps the smallest indentation the selection had, so
fences nested inside lists or block quotes stay aligned. Whole programs,
top-level declarations and excerpts of function bodies are all accepted.
"""

from gofencefmt.errors import (
    FenceFormatError,
    FormatterUnavailable,
    InputReadError,
    MarkerMissing,
    MarkerNotFound,
    RenderError,
    StructureUnavailable,
)
from gofencefmt.pipeline import run

__all__ = [
    "run",
    "FenceFormatError",
    "FormatterUnavailable",
    "InputReadError",
    "MarkerMissing",
    "MarkerNotFound",
    "RenderError",
    "StructureUnavailable",
]
