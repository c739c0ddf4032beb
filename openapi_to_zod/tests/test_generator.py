"""
Tests for configuration, file output and the atomic writer.
"""

import pytest

from openapi_to_zod.pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    OutputConfig,
    OutputMode,
    OutputValidationError,
    PipelineGenerator,
)
from openapi_to_zod.pipeline.schema_model import LazyNode, StringNode

SPEC = {"components": {"schemas": {"Name": {"type": "string", "minLength": 1}}}}
EXPECTED = "import { z } from 'zod';\n\nexport const NameSchema = z.string().min(1);"


class TestConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.prefix == ""
        assert config.zod_module == "zod"
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS
        assert config.schema_identifier("User") == "UserSchema"

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {"prefix": "Api", "output": {"mode": "force", "atomic_write": False}, "unknown_option": 1}
        )
        assert config.schema_identifier("User") == "ApiUserSchema"
        assert config.output == OutputConfig(mode=OutputMode.FORCE, validate_before_write=True, atomic_write=False)
        assert not hasattr(config, "unknown_option")

    def test_round_trip(self):
        config = CodeGeneratorConfig(prefix="X", zod_module="zod/v4", output=OutputConfig(mode=OutputMode.FORCE))
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config


class TestPipelineGenerator:
    def test_generate(self):
        assert PipelineGenerator(SPEC).generate() == EXPECTED

    def test_convert_returns_fresh_registry(self):
        generator = PipelineGenerator(SPEC)
        first = generator.convert()
        second = generator.convert()
        assert first is not second
        assert first.schemas["Name"] is not second.schemas["Name"]
        assert isinstance(first.schemas["Name"], LazyNode)
        assert first.schemas["Name"].resolve() == second.schemas["Name"].resolve()

    def test_generate_to_new_file(self, tmp_path):
        path = tmp_path / "out" / "schemas.ts"
        PipelineGenerator(SPEC).generate_to_file(path)
        assert path.read_text() == EXPECTED

    def test_existing_file_is_an_error_by_default(self, tmp_path):
        path = tmp_path / "schemas.ts"
        path.write_text("old")
        with pytest.raises(FileExistsError):
            PipelineGenerator(SPEC).generate_to_file(path)
        assert path.read_text() == "old"

    @pytest.mark.parametrize("atomic_write", [True, False])
    def test_force_overwrites(self, tmp_path, atomic_write):
        path = tmp_path / "schemas.ts"
        path.write_text("old")
        config = CodeGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE, atomic_write=atomic_write))
        PipelineGenerator(SPEC, config).generate_to_file(path)
        assert path.read_text() == EXPECTED

    def test_non_atomic_existing_file_is_an_error(self, tmp_path):
        path = tmp_path / "schemas.ts"
        path.write_text("old")
        config = CodeGeneratorConfig(output=OutputConfig(atomic_write=False))
        with pytest.raises(FileExistsError):
            PipelineGenerator(SPEC, config).generate_to_file(path)


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "schemas.ts"
        AtomicWriter().write(path, EXPECTED)
        assert path.read_text() == EXPECTED
        assert [p.name for p in tmp_path.iterdir()] == ["schemas.ts"]

    def test_validation_failure_leaves_nothing_behind(self, tmp_path):
        path = tmp_path / "schemas.ts"
        with pytest.raises(OutputValidationError):
            AtomicWriter().write(path, "export const A = 1;")
        assert list(tmp_path.iterdir()) == []

    def test_validation_can_be_skipped(self, tmp_path):
        path = tmp_path / "schemas.ts"
        AtomicWriter().write(path, "anything", validate=False)
        assert path.read_text() == "anything"

    def test_expected_module(self, tmp_path):
        writer = AtomicWriter(zod_module="zod/v4")
        with pytest.raises(OutputValidationError):
            writer.write(tmp_path / "a.ts", EXPECTED)
        writer.write(tmp_path / "b.ts", EXPECTED.replace("'zod'", "'zod/v4'"))

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate=seen.append).write(tmp_path / "a.ts", "content")
        assert seen == ["content"]

    def test_write_if_not_exists(self, tmp_path):
        path = tmp_path / "schemas.ts"
        writer = AtomicWriter()
        assert writer.write_if_not_exists(path, EXPECTED)
        with pytest.raises(FileExistsError):
            writer.write_if_not_exists(path, EXPECTED)


def test_string_node_defaults():
    assert StringNode().checks == ()
    assert StringNode() == StringNode(checks=())
