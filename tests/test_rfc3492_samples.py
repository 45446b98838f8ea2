"""Unit tests running the RFC 3492 section 7.1 samples through the codec."""

import pytest

from punycode_mcp_server.codec import decode, decode_text, encode
from punycode_mcp_server.samples import RFC3492_SAMPLES

SAMPLE_IDS = sorted(RFC3492_SAMPLES)


class TestRFC3492Samples:
    """Test suite for the official RFC 3492 sample strings."""

    @pytest.mark.unit
    def test_all_samples_present(self):
        """Test that samples A to S are all available."""
        assert SAMPLE_IDS == list("ABCDEFGHIJKLMNOPQRS")

    @pytest.mark.unit
    @pytest.mark.parametrize("sample_id", SAMPLE_IDS)
    def test_encode_sample(self, sample_id):
        """Test that each sample encodes to the RFC label."""
        _, code_points, punycode = RFC3492_SAMPLES[sample_id]
        assert encode(code_points) == punycode

    @pytest.mark.unit
    @pytest.mark.parametrize("sample_id", SAMPLE_IDS)
    def test_decode_sample(self, sample_id):
        """Test that each RFC label decodes to the sample code points."""
        _, code_points, punycode = RFC3492_SAMPLES[sample_id]
        assert decode(punycode) == code_points

    @pytest.mark.unit
    def test_decode_russian_with_mixed_case_annotation(self):
        """Test the Russian sample as printed in the RFC, with an uppercase digit."""
        _, code_points, _ = RFC3492_SAMPLES["I"]
        assert decode("b1abfaaepdrnnbgefbaDotcwatmq2g4l") == code_points

    @pytest.mark.unit
    @pytest.mark.parametrize("sample_id", SAMPLE_IDS)
    def test_encode_matches_standard_library(self, sample_id):
        """Test that the standard library encoder produces the same label."""
        _, code_points, punycode = RFC3492_SAMPLES[sample_id]
        text = "".join(chr(code_point) for code_point in code_points)
        assert text.encode("punycode").decode("ascii") == encode(code_points) == punycode

    @pytest.mark.unit
    @pytest.mark.parametrize("sample_id", SAMPLE_IDS)
    def test_decode_matches_standard_library(self, sample_id):
        """Test that the standard library decoder reads our labels identically."""
        _, code_points, _ = RFC3492_SAMPLES[sample_id]
        label = encode(code_points)
        assert label.encode("ascii").decode("punycode") == decode_text(label)
