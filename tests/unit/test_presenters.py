"""
Unit tests for descriptor output formats.
"""

import json
import shlex

import pytest

from repodesc.core.models.descriptor import DESCRIPTOR_FIELDS, RepositoryDescriptor
from repodesc.presenters.descriptor import FORMATS, render_descriptor


@pytest.fixture
def descriptor():
    return RepositoryDescriptor(
        location="/work/my project",
        branch="feature/add-login",
        commit="abc1234",
        is_dirty="true",
        remote="git@example.com:team/project.git",
        semver="no_semver",
        stage="feature",
        version="no_tag-3-gabc1234-dirty",
    )


class TestRenderDescriptor:
    def test_json_contains_every_field(self, descriptor):
        data = json.loads(render_descriptor(descriptor, "json"))
        assert data == descriptor.to_dict()
        assert set(data) == set(DESCRIPTOR_FIELDS)

    def test_json_is_default(self, descriptor):
        assert render_descriptor(descriptor) == render_descriptor(descriptor, "json")

    def test_env_is_shell_safe(self, descriptor):
        """Each line splits back into one NAME=value word."""
        lines = render_descriptor(descriptor, "env").splitlines()

        assert len(lines) == len(DESCRIPTOR_FIELDS)
        parsed = dict(shlex.split(line)[0].split("=", 1) for line in lines)
        assert parsed["REPODESC_LOCATION"] == "/work/my project"
        assert parsed["REPODESC_IS_DIRTY"] == "true"
        assert parsed["REPODESC_VERSION"] == "no_tag-3-gabc1234-dirty"

    def test_text_lines_in_field_order(self, descriptor):
        lines = render_descriptor(descriptor, "text").splitlines()

        assert [line.split(":", 1)[0] for line in lines] == list(DESCRIPTOR_FIELDS)
        assert lines[1].endswith(" feature/add-login")

    def test_text_values_aligned(self, descriptor):
        lines = render_descriptor(descriptor, "text").splitlines()
        values = descriptor.to_dict().values()
        assert len({len(line) - len(value) for line, value in zip(lines, values)}) == 1

    @pytest.mark.parametrize("fmt", sorted(FORMATS))
    def test_rendering_is_deterministic(self, descriptor, fmt):
        assert render_descriptor(descriptor, fmt) == render_descriptor(descriptor, fmt)

    def test_unknown_format(self, descriptor):
        with pytest.raises(ValueError, match="Unknown output format"):
            render_descriptor(descriptor, "yaml")


class TestRepositoryDescriptor:
    def test_empty_field_rejected(self, descriptor):
        values = descriptor.to_dict()
        values["commit"] = ""
        with pytest.raises(ValueError):
            RepositoryDescriptor(**values)

    def test_immutable(self, descriptor):
        with pytest.raises(ValueError):
            descriptor.semver = "1.0.0"
