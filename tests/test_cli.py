"""Tests for the command line and the generator registry"""

import json

import pytest

from apigen.cli import main
from apigen.codegen import (
    GeneratorError,
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    quick_generate,
)
from apigen.codegen.languages.java import JavaGenerator
from apigen.codegen.registry import is_language_supported


class TestRegistry:
    def test_java_and_alias(self):
        assert list_supported_languages() == ["java"]
        assert isinstance(get_generator("java"), JavaGenerator)
        assert isinstance(get_generator("JVM"), JavaGenerator)

    def test_unknown_language(self):
        with pytest.raises(RegistryError, match="No generator registered"):
            get_generator("cobol")

    def test_invalid_config_is_a_registry_error(self):
        with pytest.raises(RegistryError, match="Failed to create"):
            get_generator("java", {"package_name": "not valid"})

    def test_language_info(self):
        info = get_language_info("jvm")
        assert info["name"] == "java"
        assert info["class"] == "JavaGenerator"
        assert info["file_extension"] == ".java"
        assert info["aliases"] == ["jvm"]
        assert info["package_name"] == "com.microsoft.playwright"

    def test_quick_generate(self, chromium_idd):
        files = quick_generate(json.dumps(chromium_idd), package_name="org.demo")
        assert "package org.demo;" in files["ChromiumBrowser.java"]

    def test_quick_generate_failure(self):
        idd = {"Page": {"members": {"wait": {"kind": "method", "args": "none"}}}}
        with pytest.raises(GeneratorError, match="Page.wait"):
            quick_generate(idd)

    def test_support_check_and_all_info(self):
        assert is_language_supported("Java")
        assert is_language_supported("jvm")
        assert not is_language_supported("go")
        assert list(list_all_language_info()) == ["java"]

    def test_register_rejects_non_generators(self):
        registry = GeneratorRegistry()
        with pytest.raises(RegistryError, match="CodeGenerator"):
            registry.register("text", str)

    def test_alias_conflicts(self):
        registry = GeneratorRegistry()
        registry.register("java", JavaGenerator, aliases=["jvm", "Java"])
        with pytest.raises(RegistryError, match="jvm"):
            registry.register("kotlin", JavaGenerator, aliases=["jvm"])
        with pytest.raises(RegistryError, match="java"):
            registry.register("kotlin", JavaGenerator, aliases=["java"])
        assert registry.resolve("JVM") == "java"
        assert registry.list_languages() == ["java"]

    def test_create_from_config_file(self, tmp_path):
        path = tmp_path / "apigen.json"
        path.write_text(json.dumps({"package_name": "org.demo"}), encoding="utf-8")
        registry = GeneratorRegistry()
        registry.register("java", JavaGenerator)
        generator = registry.create_generator("java", str(path))
        assert generator.config.package_name == "org.demo"


class TestGenerateCommand:
    def test_writes_one_file_per_interface(self, idd_file, tmp_path):
        output_dir = tmp_path / "out"
        assert main(["generate", str(idd_file), "-o", str(output_dir)]) == 0
        names = sorted(path.name for path in output_dir.iterdir())
        assert names == ["ChromiumBrowser.java", "ChromiumBrowserContext.java"]
        text = (output_dir / "ChromiumBrowser.java").read_text(encoding="utf-8")
        assert text.startswith("/**\n * Copyright (c) Microsoft Corporation.")
        assert "public interface ChromiumBrowser extends Browser {" in text

    def test_only_and_package(self, idd_file, tmp_path):
        output_dir = tmp_path / "out"
        code = main(
            [
                "generate",
                str(idd_file),
                "-o",
                str(output_dir),
                "--only",
                "ChromiumBrowserContext",
                "--package",
                "org.demo",
            ]
        )
        assert code == 0
        assert [path.name for path in output_dir.iterdir()] == [
            "ChromiumBrowserContext.java"
        ]
        text = (output_dir / "ChromiumBrowserContext.java").read_text(encoding="utf-8")
        assert "package org.demo;" in text

    def test_config_file(self, idd_file, tmp_path):
        config_path = tmp_path / "apigen.json"
        config_path.write_text(
            json.dumps({"add_license_header": False, "indent_size": 4}),
            encoding="utf-8",
        )
        output_dir = tmp_path / "out"
        args = ["generate", str(idd_file), "-o", str(output_dir)]
        assert main(args + ["--config", str(config_path)]) == 0
        text = (output_dir / "ChromiumBrowser.java").read_text(encoding="utf-8")
        assert text.startswith("package com.microsoft.playwright;")
        assert "\n    CDPSession newBrowserCDPSession();\n" in text

    def test_dry_run_writes_nothing(self, idd_file, tmp_path, capsys):
        output_dir = tmp_path / "out"
        args = ["generate", str(idd_file), "-o", str(output_dir), "--dry-run"]
        assert main(args) == 0
        assert not output_dir.exists()
        assert "ChromiumBrowser.java" in capsys.readouterr().out

    def test_generation_failure_writes_nothing(self, tmp_path, capsys):
        idd_path = tmp_path / "api.json"
        state = {"type": '"load"|"idle"'}
        idd = {
            "Frame": {"members": {}},
            "Page": {"members": {"wait": {"kind": "method", "args": {"state": state}}}},
        }
        idd_path.write_text(json.dumps(idd), encoding="utf-8")
        output_dir = tmp_path / "out"
        assert main(["generate", str(idd_path), "-o", str(output_dir)]) == 1
        assert not output_dir.exists()
        assert "Page.wait.state" in capsys.readouterr().out

    def test_missing_input_file(self, tmp_path):
        assert main(["generate", str(tmp_path / "missing.json")]) == 1

    def test_unsupported_language(self, idd_file, tmp_path):
        args = ["generate", str(idd_file), "-o", str(tmp_path), "--language", "go"]
        assert main(args) == 1

    def test_bad_config_file(self, idd_file, tmp_path):
        config_path = tmp_path / "apigen.json"
        config_path.write_text("{", encoding="utf-8")
        args = ["generate", str(idd_file), "--config", str(config_path)]
        assert main(args) == 1

    def test_input_is_required(self):
        with pytest.raises(SystemExit):
            main(["generate"])


class TestInfoCommands:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "generate" in capsys.readouterr().out

    def test_languages(self, capsys):
        assert main(["languages"]) == 0
        assert "java" in capsys.readouterr().out

    def test_info_by_alias(self, capsys):
        assert main(["info", "jvm"]) == 0
        assert "com.microsoft.playwright" in capsys.readouterr().out

    def test_info_unknown_language(self):
        assert main(["info", "cobol"]) == 1
