#!/usr/bin/env python3

"""Binary container reading.

Loads a compiled image into the three things symbol resolution needs: the
raw bytes, the image base, and the section table. PE images are read with
pefile, ELF images with pyelftools. The container format is detected from
the file's magic bytes.

Section virtual ranges are image-relative (RVAs) for both formats.
"""

from dataclasses import dataclass
from enum import Enum
from io import BytesIO
from pathlib import Path

import pefile
from elftools.common.exceptions import ELFError
from elftools.elf.constants import SH_FLAGS
from elftools.elf.elffile import ELFFile

from ..domain.errors import BinaryFormatError
from ..domain.models.symbols import SectionRange
from .logging import get_logger

logger = get_logger(__name__)

ELF_PAGE_SIZE = 0x1000
PE_MAGIC = b"MZ"
ELF_MAGIC = b"\x7fELF"


class ImageFormat(Enum):
    """Supported binary container formats."""

    PE = "pe"
    ELF = "elf"

    def __str__(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class BinaryImage:
    """A loaded binary: raw bytes plus container metadata. Read-only."""

    data: bytes
    image_base: int
    is_64: bool
    sections: tuple[SectionRange, ...]
    format: ImageFormat


class BinaryImageLoader:
    """Reads PE and ELF images into BinaryImage."""

    @staticmethod
    def detect_format(data: bytes) -> ImageFormat:
        """Detect the container format from magic bytes.

        Raises:
            BinaryFormatError: Neither a PE nor an ELF image
        """
        if data.startswith(ELF_MAGIC):
            return ImageFormat.ELF
        if data.startswith(PE_MAGIC):
            return ImageFormat.PE
        raise BinaryFormatError(f"Unrecognized binary format (magic {data[:4]!r})")

    @staticmethod
    def load(path: Path) -> BinaryImage:
        """Read and parse a binary from disk.

        Args:
            path: Path to the PE or ELF file

        Returns:
            Parsed BinaryImage

        Raises:
            BinaryFormatError: The file cannot be read or parsed
        """
        logger.debug(f"Reading binary: {path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise BinaryFormatError(f"Failed to read {path}: {e}") from e
        return BinaryImageLoader.parse(data)

    @staticmethod
    def parse(data: bytes) -> BinaryImage:
        """Parse raw bytes into a BinaryImage."""
        image_format = BinaryImageLoader.detect_format(data)
        if image_format is ImageFormat.PE:
            image = BinaryImageLoader._parse_pe(data)
        else:
            image = BinaryImageLoader._parse_elf(data)

        logger.info(
            f"Loaded {image.format} image: base=0x{image.image_base:x}, "
            f"{'64' if image.is_64 else '32'}-bit, {len(image.sections)} sections"
        )
        return image

    @staticmethod
    def _parse_pe(data: bytes) -> BinaryImage:
        try:
            pe = pefile.PE(data=data, fast_load=True)
        except pefile.PEFormatError as e:
            raise BinaryFormatError(str(e)) from e

        sections = tuple(
            SectionRange(
                index=i,
                virtual_start=section.VirtualAddress,
                virtual_end=section.VirtualAddress + section.Misc_VirtualSize,
                raw_start=section.PointerToRawData,
                raw_end=section.PointerToRawData + section.SizeOfRawData,
                name=section.Name.rstrip(b"\x00").decode("utf-8", errors="replace"),
            )
            for i, section in enumerate(pe.sections, 1)
        )

        return BinaryImage(
            data=data,
            image_base=pe.OPTIONAL_HEADER.ImageBase,
            is_64=pe.OPTIONAL_HEADER.Magic == pefile.OPTIONAL_HEADER_MAGIC_PE_PLUS,
            sections=sections,
            format=ImageFormat.PE,
        )

    @staticmethod
    def _parse_elf(data: bytes) -> BinaryImage:
        try:
            elf = ELFFile(BytesIO(data))  # type: ignore[no-untyped-call]
            load_addresses = [
                segment["p_vaddr"]
                for segment in elf.iter_segments()  # type: ignore[no-untyped-call]
                if segment["p_type"] == "PT_LOAD"
            ]
            image_base = min(load_addresses, default=0) & ~(ELF_PAGE_SIZE - 1)

            sections = []
            for index, section in enumerate(elf.iter_sections()):  # type: ignore[no-untyped-call]
                if section["sh_type"] == "SHT_NULL":
                    continue

                virtual_start = virtual_end = 0
                if section["sh_flags"] & SH_FLAGS.SHF_ALLOC:
                    virtual_start = section["sh_addr"] - image_base
                    virtual_end = virtual_start + section["sh_size"]

                raw_size = 0 if section["sh_type"] == "SHT_NOBITS" else section["sh_size"]
                sections.append(
                    SectionRange(
                        index=index,
                        virtual_start=virtual_start,
                        virtual_end=virtual_end,
                        raw_start=section["sh_offset"],
                        raw_end=section["sh_offset"] + raw_size,
                        name=section.name,
                    )
                )
        except ELFError as e:
            raise BinaryFormatError(str(e)) from e

        return BinaryImage(
            data=data,
            image_base=image_base,
            is_64=elf.elfclass == 64,
            sections=tuple(sections),
            format=ImageFormat.ELF,
        )
