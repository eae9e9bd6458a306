"""Shared pytest fixtures for patching tests."""

from pathlib import Path

import pytest


@pytest.fixture
def example_patch_set_path():
    """Path to the sample patch set shipped with the repo."""
    return Path(__file__).parent.parent / "patchsets" / "example.toml"


@pytest.fixture
def sample_binary():
    """
    Small x86-64 style blob containing targets for the sample patch set.

    Offsets:
        0x00: push rbp; mov rbp, rsp
        0x04: call rel32; mov ...           (blank_call)
        0x0B: test eax, eax; je +0x10       (skip_check)
        0x0F: call rel32; mov ...           (blank_call)
        0x16: ret
    """
    return bytes(
        [
            0x55, 0x48, 0x89, 0xE5,
            0xE8, 0x10, 0x20, 0x30, 0x40, 0x48, 0x8B,
            0x85, 0xC0, 0x74, 0x10,
            0xE8, 0xAA, 0xBB, 0xCC, 0xDD, 0x48, 0x8B,
            0xC3,
        ]
    )


@pytest.fixture
def binary_path(tmp_path, sample_binary):
    """Write the sample blob to a temporary file."""
    path = tmp_path / "target.bin"
    path.write_bytes(sample_binary)
    return path


@pytest.fixture
def write_patch_set(tmp_path):
    """Write patch-set text to a temporary file with the given suffix."""

    def _write(text: str, suffix: str = ".toml") -> Path:
        path = tmp_path / f"patches{suffix}"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def patched_sample_binary():
    """sample_binary after the example patch set has run."""
    return bytes(
        [
            0x55, 0x48, 0x89, 0xE5,
            0x0F, 0x1F, 0x44, 0x00, 0x00, 0x48, 0x8B,
            0x85, 0xC0, 0xEB, 0x10,
            0x0F, 0x1F, 0x44, 0x00, 0x00, 0x48, 0x8B,
            0xC3,
        ]
    )
