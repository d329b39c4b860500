#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the eepromcfg command line application."""

import os
import sys
from typing import Any

import pytest

from eepromcfg import __version__ as eepromcfg_version
from eepromcfg.apps import eepromcfg
from eepromcfg.image.eeprom import EepromImage
from eepromcfg.image.exceptions import ConfigTooLarge, WrongImageSize
from eepromcfg.image.sections import IMAGE_SIZE
from eepromcfg.utils.misc import load_binary, write_file
from tests.cli_runner import CliRunner
from tests.misc import build_image, file_section, raw_section

CONFIG = b"[all]\nBOOT_UART=0\n"
NEW_CONFIG = b"[all]\nBOOT_UART=1\nBOOT_ORDER=0xf41\n"


@pytest.fixture
def eeprom_file(tmpdir: Any) -> str:
    """Path to an EEPROM image with a configuration file."""
    path = os.path.join(tmpdir, "pieeprom.bin")
    data = build_image(
        raw_section(bytes(512)),
        file_section("pubkey.bin", b"\x01" * 40),
        file_section("bootconf.txt", CONFIG),
    )
    write_file(bytes(data), path, mode="wb")
    return path


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(eepromcfg.main, ["--version"])
    assert eepromcfg_version in result.output


def test_read_to_stdout(cli_runner: CliRunner, eeprom_file: str) -> None:
    result = cli_runner.invoke(eepromcfg.main, ["config", eeprom_file])
    assert result.stdout_bytes == CONFIG


def test_read_to_file(cli_runner: CliRunner, eeprom_file: str, tmpdir: Any) -> None:
    output = os.path.join(tmpdir, "bootconf.txt")
    cli_runner.invoke(eepromcfg.main, ["config", eeprom_file, "-o", output])
    assert load_binary(output) == CONFIG


def test_read_named_file(cli_runner: CliRunner, eeprom_file: str) -> None:
    result = cli_runner.invoke(eepromcfg.main, ["config", eeprom_file, "--name", "pubkey.bin"])
    assert result.stdout_bytes == b"\x01" * 40


def test_write_to_file(
    cli_runner: CliRunner, eeprom_file: str, tmpdir: Any, monkeypatch: Any
) -> None:
    monkeypatch.chdir(tmpdir)
    write_file(NEW_CONFIG, "new_bootconf.txt", mode="wb")
    cmd = f"config {eeprom_file} -c new_bootconf.txt -o pieeprom-new.bin"
    cli_runner.invoke(eepromcfg.main, cmd.split())
    image = EepromImage.load("pieeprom-new.bin")
    assert image.read_config() == NEW_CONFIG
    assert image.size == IMAGE_SIZE
    # the input image stays untouched
    assert EepromImage.load(eeprom_file).read_config() == CONFIG


def test_write_to_stdout(cli_runner: CliRunner, eeprom_file: str, tmpdir: Any) -> None:
    config_file = os.path.join(tmpdir, "new_bootconf.txt")
    write_file(NEW_CONFIG, config_file, mode="wb")
    result = cli_runner.invoke(eepromcfg.main, ["config", eeprom_file, "-c", config_file])
    assert len(result.stdout_bytes) == IMAGE_SIZE
    assert EepromImage.parse(result.stdout_bytes).read_config() == NEW_CONFIG


def test_write_from_stdin(cli_runner: CliRunner, eeprom_file: str, tmpdir: Any) -> None:
    output = os.path.join(tmpdir, "pieeprom-new.bin")
    cli_runner.invoke(
        eepromcfg.main, ["config", eeprom_file, "-c", "-", "-o", output], input=NEW_CONFIG
    )
    assert EepromImage.load(output).read_config() == NEW_CONFIG


def test_write_too_large(cli_runner: CliRunner, eeprom_file: str, tmpdir: Any) -> None:
    config_file = os.path.join(tmpdir, "new_bootconf.txt")
    write_file(b"A" * 2048, config_file, mode="wb")
    output = os.path.join(tmpdir, "pieeprom-new.bin")
    result = cli_runner.invoke(
        eepromcfg.main, ["config", eeprom_file, "-c", config_file, "-o", output], expected_code=1
    )
    assert isinstance(result.exception, ConfigTooLarge)
    assert not os.path.exists(output)


def test_wrong_image_size(cli_runner: CliRunner, tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "short.bin")
    write_file(b"\xff" * 1024, path, mode="wb")
    result = cli_runner.invoke(eepromcfg.main, ["config", path], expected_code=1)
    assert isinstance(result.exception, WrongImageSize)


def test_sections(cli_runner: CliRunner, eeprom_file: str) -> None:
    result = cli_runner.invoke(eepromcfg.main, ["sections", eeprom_file])
    assert "0x55AAF11F" in result.output
    assert "bootconf.txt" in result.output
    assert "pubkey.bin" in result.output
    assert "0x00000208" in result.output


def test_safe_main_error_code(monkeypatch: Any, tmpdir: Any, capsys: Any) -> None:
    path = os.path.join(tmpdir, "short.bin")
    write_file(b"\xff" * 1024, path, mode="wb")
    monkeypatch.setattr(sys, "argv", ["eepromcfg", "config", path])
    with pytest.raises(SystemExit) as exc:
        eepromcfg.safe_main()
    assert exc.value.code == 2
    assert "WrongImageSize" in capsys.readouterr().err


def test_safe_main_success(monkeypatch: Any, eeprom_file: str, tmpdir: Any) -> None:
    output = os.path.join(tmpdir, "out.txt")
    monkeypatch.setattr(sys, "argv", ["eepromcfg", "config", eeprom_file, "-o", output])
    with pytest.raises(SystemExit) as exc:
        eepromcfg.safe_main()
    assert exc.value.code == 0
    assert load_binary(output) == CONFIG
