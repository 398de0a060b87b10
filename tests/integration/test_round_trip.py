"""Integration tests for generate -> format -> parse."""

import pytest
from rfcuuid import (
    FIELD_SIZES,
    UUIDValidator,
    V1Generator,
    generate_v1,
    generate_v4,
    parse,
)


class TestRoundTrip:
    """Tests that generated UUIDs survive formatting and parsing."""

    @pytest.mark.parametrize("factory", [generate_v1, generate_v4])
    def test_parse_to_string_round_trip(self, factory) -> None:
        """Test parse(u.to_string()) equals u."""
        for _ in range(300):
            uuid = factory()
            parsed = parse(uuid.to_string())

            assert parsed is not None
            assert parsed.equals(uuid)
            assert parsed.bit_string == uuid.bit_string

    @pytest.mark.parametrize("factory", [generate_v1, generate_v4])
    def test_parsed_fields_fit_widths(self, factory) -> None:
        """Test field widths after a round trip."""
        for _ in range(100):
            parsed = parse(str(factory()))
            for value, width in zip(parsed.int_fields, FIELD_SIZES):
                assert 0 <= value < 2**width

    def test_generate_validate_parse_workflow(self, fake_clock) -> None:
        """Test full workflow: generate -> validate -> parse."""
        generator = V1Generator(clock=fake_clock)
        validator = UUIDValidator()

        for step in range(50):
            fake_clock.now += step % 3
            text = str(generator.generate())

            result = validator.validate(text)
            assert result.valid is True
            assert result.warnings == []

            assert parse(text).version == 1

    def test_regressing_clock_round_trip(self, fake_clock) -> None:
        """Test round trips while the clock jumps back and forth."""
        generator = V1Generator(clock=fake_clock)
        seen = set()

        for step in range(100):
            fake_clock.now += -7 if step % 4 == 0 else 3
            uuid = generator.generate()
            seen.add(uuid)
            assert parse(str(uuid)) == uuid

        assert len(seen) == 100
