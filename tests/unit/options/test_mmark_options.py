#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_mmark_options.py
"""Unit tests for renderer options."""

from dataclasses import FrozenInstanceError, fields

import pytest

from mmarkfmt.ast import WalkStatus
from mmarkfmt.constants import DEFAULT_TEXT_WIDTH
from mmarkfmt.options import BaseRendererOptions, Flags, MmarkRendererOptions


@pytest.mark.unit
class TestMmarkRendererOptions:
    """Tests for MmarkRendererOptions."""

    def test_defaults(self):
        options = MmarkRendererOptions()
        assert options.text_width == DEFAULT_TEXT_WIDTH == 80
        assert options.flags is Flags.NONE
        assert options.render_node_hook is None

    def test_is_base_options(self):
        assert isinstance(MmarkRendererOptions(), BaseRendererOptions)

    def test_frozen(self):
        options = MmarkRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.text_width = 10

    def test_create_updated(self):
        original = MmarkRendererOptions(text_width=72)

        def hook(writer, node, entering):
            return WalkStatus.GO_TO_NEXT, False

        updated = original.create_updated(render_node_hook=hook)
        assert updated.text_width == 72
        assert updated.render_node_hook is hook
        assert original.render_node_hook is None

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_width_rejected(self, width):
        with pytest.raises(ValueError, match="text_width must be positive"):
            MmarkRendererOptions(text_width=width)

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            MmarkRendererOptions().create_updated(text_width=0)

    def test_fields_documented(self):
        for option_field in fields(MmarkRendererOptions):
            assert option_field.metadata.get("help"), option_field.name

    def test_common_flags(self):
        assert Flags.COMMON == Flags.NONE
