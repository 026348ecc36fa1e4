from typing import List

import pytest

from src.barcodegen.code128 import (
    CODE128_PATTERNS,
    SHIFT_TO_B,
    START_A,
    START_B,
    START_C,
    STOP_PATTERN,
    TERMINATOR_PATTERN,
    _subset_c_values,
    encode_code128,
    uses_subset_c,
)
from src.barcodegen.errors import InvalidDigitPairError, OutOfAlphabetError
from src.model.enums import Symbology, SymbolErrorKind

START_B_PATTERN = 0x690
START_C_PATTERN = 0x69C
SHIFT_PATTERN = 0x5EE


def _pattern(value: int) -> int:
    return CODE128_PATTERNS[value]


class TestCode128Tables:
    def test_table_size(self) -> None:
        assert len(CODE128_PATTERNS) == 106

    def test_patterns_fit_eleven_bits(self) -> None:
        assert all(0x400 <= p < 0x800 for p in CODE128_PATTERNS)

    def test_structural_patterns(self) -> None:
        assert _pattern(START_B) == START_B_PATTERN
        assert _pattern(START_C) == START_C_PATTERN
        assert _pattern(SHIFT_TO_B) == SHIFT_PATTERN
        assert _pattern(START_A) == 0x684
        assert STOP_PATTERN == 0x63A
        assert TERMINATOR_PATTERN == 0b11

    def test_first_values(self) -> None:
        assert CODE128_PATTERNS[:10] == (
            0x6CC, 0x66C, 0x666, 0x498, 0x48C, 0x44C, 0x4C8, 0x4C4, 0x464, 0x648,
        )  # fmt: skip


class TestModeSelection:
    @pytest.mark.parametrize(
        "data,subset_c",
        [
            ("123456", True),
            ("1234", True),
            ("12345", True),
            ("123", False),
            ("ABC", False),
            ("12AB", False),
            ("", False),
        ],
    )
    def test_uses_subset_c(self, data: str, subset_c: bool) -> None:
        assert uses_subset_c(data) is subset_c

    def test_numeric_uses_start_c(self) -> None:
        assert encode_code128("123456").bitmasks[0] == START_C_PATTERN

    def test_text_uses_start_b(self) -> None:
        assert encode_code128("ABC").bitmasks[0] == START_B_PATTERN

    def test_short_numeric_uses_start_b(self) -> None:
        assert encode_code128("123").bitmasks[0] == START_B_PATTERN


class TestSubsetB:
    def test_space_is_value_zero(self) -> None:
        assert encode_code128(" ").bitmasks[1] == _pattern(0)

    def test_single_letter(self) -> None:
        desc = encode_code128("A")
        # 104 + 33 * 1 = 137 -> 137 % 103 = 34
        assert desc.bitmasks == (
            START_B_PATTERN,
            _pattern(33),
            _pattern(34),
            STOP_PATTERN,
            TERMINATOR_PATTERN,
        )

    def test_checksum_hi(self) -> None:
        desc = encode_code128("Hi")
        # 104 + 40 * 1 + 73 * 2 = 290 -> 84
        assert desc.bitmasks[-3] == _pattern(84)

    def test_short_digits_encoded_per_character(self) -> None:
        desc = encode_code128("01")
        assert desc.bitmasks[1:3] == (_pattern(16), _pattern(17))
        assert len(desc) == 6

    def test_tilde_is_last_valid(self) -> None:
        assert encode_code128("~").bitmasks[1] == _pattern(94)

    @pytest.mark.parametrize("data", ["\x00", "\x1f", "\x7f", "AB\x7f", "é"])
    def test_out_of_alphabet(self, data: str) -> None:
        with pytest.raises(OutOfAlphabetError) as excinfo:
            encode_code128(data)
        assert excinfo.value.kind is SymbolErrorKind.OUT_OF_ALPHABET
        assert excinfo.value.symbology is Symbology.CODE128

    def test_error_position(self) -> None:
        with pytest.raises(OutOfAlphabetError) as excinfo:
            encode_code128("AB\x7f")
        assert excinfo.value.position == 2


class TestSubsetC:
    def test_zero_pairs(self) -> None:
        desc = encode_code128("0000")
        assert desc.bitmasks[:3] == (START_C_PATTERN, _pattern(0), _pattern(0))

    def test_mixed_pairs(self) -> None:
        desc = encode_code128("0102")
        assert desc.bitmasks[1:3] == (_pattern(1), _pattern(2))

    def test_checksum_1234(self) -> None:
        desc = encode_code128("1234")
        # 105 + 12 * 1 + 34 * 2 = 185 -> 82
        assert desc.bitmasks == (
            START_C_PATTERN,
            _pattern(12),
            _pattern(34),
            _pattern(82),
            STOP_PATTERN,
            TERMINATOR_PATTERN,
        )

    def test_odd_length_single_shift(self) -> None:
        desc = encode_code128("12345")
        masks: List[int] = list(desc.bitmasks)
        # Start, 12, 34, shift, '5', checksum, stop, terminator
        assert masks.count(SHIFT_PATTERN) == 1
        assert masks.index(SHIFT_PATTERN) == 3
        assert masks[1:3] == [_pattern(12), _pattern(34)]
        assert masks[4] == _pattern(ord("5") - 32)

    def test_odd_length_checksum_weighting(self) -> None:
        desc = encode_code128("12345")
        # 105 + 12*1 + 34*2 + 100*3 + 21*4 = 569 -> 569 % 103 = 54
        assert desc.bitmasks[5] == _pattern(54)
        assert desc.total_modules == 11 * 7 + 2

    def test_even_length_has_no_shift(self) -> None:
        desc = encode_code128("123456")
        assert SHIFT_PATTERN not in desc.bitmasks[:-3]
        assert len(desc) == 1 + 3 + 3


class TestSubsetCDigitChecks:
    def test_non_digit_pair(self) -> None:
        with pytest.raises(InvalidDigitPairError) as excinfo:
            _subset_c_values("12A4")
        assert excinfo.value.kind is SymbolErrorKind.INVALID_DIGIT_PAIR
        assert excinfo.value.position == 2
        assert excinfo.value.value == "A4"

    def test_non_digit_trailing_character(self) -> None:
        with pytest.raises(InvalidDigitPairError) as excinfo:
            _subset_c_values("1234X")
        assert excinfo.value.position == 4

    def test_trailing_digit_values(self) -> None:
        assert _subset_c_values("12340") == [12, 34, SHIFT_TO_B, 16]
        assert _subset_c_values("12349") == [12, 34, SHIFT_TO_B, 25]


class TestCode128Layout:
    @pytest.mark.parametrize("data", ["", "A", "AB", "TEST", "1234", "12345", "Hello, World!"])
    def test_widths_and_total(self, data: str) -> None:
        desc = encode_code128(data)
        widths = desc.bit_widths
        assert widths[:-1] == (11,) * (len(widths) - 1)
        assert widths[-1] == 2
        assert desc.total_modules == 11 * (len(desc) - 1) + 2
        assert desc.total_modules == sum(widths)

    def test_stop_and_terminator_last(self) -> None:
        desc = encode_code128("TEST")
        assert desc.bitmasks[-2:] == (STOP_PATTERN, TERMINATOR_PATTERN)

    def test_raster_ends_with_stop_bars(self) -> None:
        assert encode_code128("TEST").to_bitstring().endswith("1100011101011")
