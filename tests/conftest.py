"""Pytest configuration and shared fixtures."""

import struct
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sigsym_reconstructor.domain.models.symbols import SectionRange
from sigsym_reconstructor.infrastructure.binary_image import BinaryImage, ImageFormat
from sigsym_reconstructor.infrastructure.logging import LoggerSetup

IMAGE_BASE = 0x400000


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sections() -> tuple[SectionRange, ...]:
    """A PE-like section table: .text at RVA 0x1000, .data at RVA 0x2000.

    File layout: .text data at 0x400, .data data at 0x600.
    """
    return (
        SectionRange(1, 0x1000, 0x1200, 0x400, 0x600, ".text"),
        SectionRange(2, 0x2000, 0x2100, 0x600, 0x700, ".data"),
    )


@pytest.fixture
def image_data() -> bytes:
    """Raw image bytes with a few recognisable code fragments.

    - 0x400 (.text):  55 8B EC 83 EC 10          push ebp; mov ebp, esp; ...
    - 0x420 (.text):  A1 <0x402010>              mov eax, [g_counter]
    - 0x440 (.text):  E8 <rel32 -> .text+0x80>   call helper
    """
    data = bytearray(0x700)
    data[0:2] = b"MZ"
    data[0x400:0x406] = bytes.fromhex("558BEC83EC10")
    data[0x420] = 0xA1
    struct.pack_into("<I", data, 0x421, IMAGE_BASE + 0x2010)
    data[0x440] = 0xE8
    # Displacement is relative to the end of the 5-byte call (file offset 0x445)
    struct.pack_into("<I", data, 0x441, 0x480 - 0x445)
    return bytes(data)


@pytest.fixture
def binary_image(image_data: bytes, sections: tuple[SectionRange, ...]) -> BinaryImage:
    return BinaryImage(
        data=image_data,
        image_base=IMAGE_BASE,
        is_64=False,
        sections=sections,
        format=ImageFormat.PE,
    )


@pytest.fixture
def clean_logging():
    """Make sure LoggerSetup starts and ends uninitialized."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
