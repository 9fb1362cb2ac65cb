"""
Tests for leet_translator/prompts.py - Instruction templates.
"""
from leet_translator.prompts import build_prompt, FROM_LEET_TEMPLATE, TO_LEET_TEMPLATE
from leet_translator.schemas import TranslateMode


class TestBuildPrompt:
    """Tests for build_prompt function."""

    def test_from_leet_is_default(self):
        assert build_prompt("H3110") == FROM_LEET_TEMPLATE.format(text="H3110")

    def test_from_leet_embeds_text(self):
        prompt = build_prompt("H3110 W0r1d", TranslateMode.FROM_LEET)

        assert '"H3110 W0r1d"' in prompt
        assert "into natural English" in prompt

    def test_to_leet_embeds_text(self):
        prompt = build_prompt("Hello World", TranslateMode.TO_LEET)

        assert '"Hello World"' in prompt
        assert "into leet speak" in prompt
        assert "character substitutions" in prompt
        assert "slang substitutions" in prompt

    def test_modes_select_distinct_templates(self):
        to_leet = build_prompt("same", TranslateMode.TO_LEET)
        from_leet = build_prompt("same", TranslateMode.FROM_LEET)

        assert to_leet != from_leet
        assert to_leet == TO_LEET_TEMPLATE.format(text="same")
        assert from_leet == FROM_LEET_TEMPLATE.format(text="same")

    def test_accepts_raw_mode_string(self):
        assert build_prompt("x", "toLeet") == build_prompt("x", TranslateMode.TO_LEET)

    def test_text_is_not_escaped(self):
        text = 'say "{hi}" \\o/'
        prompt = build_prompt(text, TranslateMode.FROM_LEET)

        assert f'"{text}"' in prompt
