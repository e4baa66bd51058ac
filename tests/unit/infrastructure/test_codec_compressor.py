from typing import Any, List, Optional, Tuple

import pytest

from infodist.domain.ports.codec_port import CodecPort
from infodist.infrastructure.compression import CodecCompressor, NoopCodec


class RecordingCodec(CodecPort):
    """Identity codec appending lifecycle events to a shared ``log`` list."""

    def __init__(
        self,
        log: List[Tuple[str, Any]],
        fail_on: Optional[bytes] = None,
        fail_initialize: bool = False,
        **extra: Any,
    ) -> None:
        self.log = log
        self.fail_on = fail_on
        self.fail_initialize = fail_initialize
        log.append(("init", list(extra.items())))

    def initialize(self) -> None:
        self.log.append(("initialize", None))
        if self.fail_initialize:
            raise RuntimeError("initialize failed")

    def transform(self, data: bytes) -> bytes:
        self.log.append(("transform", data))
        if self.fail_on is not None and data == self.fail_on:
            raise RuntimeError("transform failed")
        return data

    def finalize(self) -> None:
        self.log.append(("finalize", None))


def _count(log, name):
    return sum(1 for event, _ in log if event == name)


@pytest.fixture
def log() -> List[Tuple[str, Any]]:
    return []


class TestCodecCompressorConstruction:

    def test_noop_codec(self):
        compressor = CodecCompressor(NoopCodec)

        assert compressor.codec_type is NoopCodec
        assert dict(compressor.options) == {}

    def test_options_preserve_insertion_order(self):
        compressor = CodecCompressor(NoopCodec, arg1="1", arg2=2)

        assert list(compressor.options.items()) == [("arg1", "1"), ("arg2", 2)]

    def test_options_are_read_only(self):
        compressor = CodecCompressor(NoopCodec, arg1="1")

        with pytest.raises(TypeError):
            compressor.options["arg1"] = "2"

    def test_construction_does_not_build_codec(self, log):
        CodecCompressor(RecordingCodec, log=log)

        assert log == []

    def test_options_forwarded_unchanged(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log, zeta=1, alpha="a")

        compressor.compressed_length(b"x")

        assert log[0] == ("init", [("zeta", 1), ("alpha", "a")])

    def test_equality_and_repr(self):
        assert CodecCompressor(NoopCodec, a=1) == CodecCompressor(NoopCodec, a=1)
        assert CodecCompressor(NoopCodec, a=1) != CodecCompressor(NoopCodec, a=2)
        assert repr(CodecCompressor(NoopCodec, a=1)) == "CodecCompressor(NoopCodec, a=1)"
        assert repr(CodecCompressor(NoopCodec)) == "CodecCompressor(NoopCodec)"


class TestCompressedLength:

    def test_noop_length_is_input_length(self):
        compressor = CodecCompressor(NoopCodec)

        assert compressor.compressed_length(b"") == 0
        assert compressor.compressed_length("xy") == 2

    def test_lifecycle_on_success(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log)

        assert compressor.compressed_length("abc") == 3
        assert [event for event, _ in log] == [
            "init",
            "initialize",
            "transform",
            "finalize",
        ]

    def test_string_converted_before_transform(self, log):
        CodecCompressor(RecordingCodec, log=log).compressed_length("abc")

        assert ("transform", b"abc") in log

    def test_finalize_runs_when_transform_fails(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log, fail_on=b"bad")

        with pytest.raises(RuntimeError, match="transform failed"):
            compressor.compressed_length(b"bad")

        assert _count(log, "finalize") == 1

    def test_finalize_runs_when_initialize_fails(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log, fail_initialize=True)

        with pytest.raises(RuntimeError, match="initialize failed"):
            compressor.compressed_length(b"data")

        assert _count(log, "transform") == 0
        assert _count(log, "finalize") == 1

    def test_each_call_uses_new_codec(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log)

        compressor.compressed_length(b"a")
        compressor.compressed_length(b"b")

        assert _count(log, "init") == 2
        assert _count(log, "finalize") == 2

    def test_rejected_options_propagate(self):
        compressor = CodecCompressor(NoopCodec, unknown=1)

        with pytest.raises(TypeError):
            compressor.compressed_length(b"data")


class TestCompressedLengths:

    def test_batch_matches_single_path(self, sample_strings):
        compressor = CodecCompressor(NoopCodec)
        as_bytes = [s.encode("utf-8") for s in sample_strings]

        expected = [compressor.compressed_length(s) for s in as_bytes]

        assert compressor.compressed_lengths(sample_strings) == expected
        assert compressor.compressed_lengths(as_bytes) == expected
        assert expected == [0, 1, 2]

    def test_single_lifecycle_for_batch(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log)

        assert compressor.compressed_lengths(["a", b"bb", bytearray(b"ccc")]) == [1, 2, 3]
        assert _count(log, "init") == 1
        assert _count(log, "initialize") == 1
        assert _count(log, "transform") == 3
        assert _count(log, "finalize") == 1
        assert log[-1] == ("finalize", None)

    def test_failure_mid_batch_stops_and_finalizes(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log, fail_on=b"bad")

        with pytest.raises(RuntimeError):
            compressor.compressed_lengths([b"ok", b"bad", b"never"])

        transformed = [value for event, value in log if event == "transform"]
        assert transformed == [b"ok", b"bad"]
        assert _count(log, "finalize") == 1

    def test_empty_batch_still_finalizes(self, log):
        compressor = CodecCompressor(RecordingCodec, log=log)

        assert compressor.compressed_lengths([]) == []
        assert _count(log, "finalize") == 1
