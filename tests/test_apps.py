import io

import numpy as np
import pytest

from pydaptivecanceller import NlmsNoiseCanceller
from pydaptivecanceller._utils.pcm import read_int16_blocks, write_float32, write_int16
from pydaptivecanceller.apps import end_to_end, noise_canceller, noisy_cosine


class _TrickleStream(io.BytesIO):
    """Byte stream that never returns more than a few bytes per read, like a pipe."""

    def read(self, size=-1):
        return super().read(min(size, 3) if size and size > 0 else size)


def _pcm_bytes(samples):
    buf = io.BytesIO()
    write_int16(buf, samples)
    return buf.getvalue()


def test_read_int16_blocks_splits_and_drops_odd_byte():
    data = _pcm_bytes(np.arange(10, dtype=np.int16)) + b"\x01"
    blocks = list(read_int16_blocks(io.BytesIO(data), 4))

    assert [b.size for b in blocks] == [4, 4, 2]
    np.testing.assert_array_equal(np.concatenate(blocks), np.arange(10))
    assert all(b.dtype == np.int16 for b in blocks)


def test_read_int16_blocks_fills_blocks_from_short_reads():
    data = _pcm_bytes(np.arange(-5, 6, dtype=np.int16))
    blocks = list(read_int16_blocks(_TrickleStream(data), 4))

    assert [b.size for b in blocks] == [4, 4, 3]
    np.testing.assert_array_equal(np.concatenate(blocks), np.arange(-5, 6))

    with pytest.raises(ValueError):
        list(read_int16_blocks(io.BytesIO(data), 0))


def test_write_float32_is_little_endian_float32():
    buf = io.BytesIO()
    write_float32(buf, [1.0, -0.5])
    np.testing.assert_array_equal(np.frombuffer(buf.getvalue(), dtype="<f4"), [1.0, -0.5])


def test_noise_canceller_streams_pcm(pcm_signal):
    stdin = io.BytesIO(_pcm_bytes(pcm_signal))
    stdout = io.BytesIO()
    stderr = io.StringIO()

    rc = noise_canceller.main(
        ["-f", "5", "-d", "5", "-b", "0.1", "--block-size", "700", "-v"],
        stdin=stdin, stdout=stdout, stderr=stderr,
    )

    assert rc == 0
    out = np.frombuffer(stdout.getvalue(), dtype="<i2")
    assert out.size == pcm_signal.size

    expected = NlmsNoiseCanceller(5, 5, 0.1).accept_data(pcm_signal)
    np.testing.assert_array_equal(out, expected)
    assert f"{pcm_signal.size} samples" in stderr.getvalue()


def test_noise_canceller_defaults_and_empty_input():
    args = noise_canceller.build_parser().parse_args([])
    cfg = noise_canceller.config_from_args(args)
    assert (cfg.filter_length, cfg.reference_delay, cfg.beta) == (5, 5, 0.1)
    assert cfg.block_size == 4000
    assert cfg.history == "circular"

    stdout = io.BytesIO()
    assert noise_canceller.main([], stdin=io.BytesIO(b""), stdout=stdout) == 0
    assert stdout.getvalue() == b""


@pytest.mark.parametrize(
    "argv",
    [["-f", "0"], ["-d", "-1"], ["-b", "0"], ["-b", "nan"], ["--history", "ring"], ["--block-size", "0"]],
)
def test_noise_canceller_rejects_bad_options(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        noise_canceller.main(argv, stdin=io.BytesIO(b""), stdout=io.BytesIO())
    assert excinfo.value.code == 2


def test_noisy_cosine_writes_pcm():
    stdout = io.BytesIO()
    rc = noisy_cosine.main(["-a", "0.5", "-f", "100", "-r", "1000", "-d", "0.5",
                            "-v", "0", "--seed", "1"], stdout=stdout)
    assert rc == 0

    samples = np.frombuffer(stdout.getvalue(), dtype="<i2")
    assert samples.size == 500

    k = np.arange(500)
    expected = np.trunc(0.5 * np.cos(2.0 * np.pi * 100.0 * k / 1000.0) * 32767)
    np.testing.assert_allclose(samples, expected, atol=1)


def test_noisy_cosine_seed_reproducible_and_bad_options():
    first, second = io.BytesIO(), io.BytesIO()
    noisy_cosine.main(["-d", "0.01", "--seed", "5"], stdout=first)
    noisy_cosine.main(["-d", "0.01", "--seed", "5"], stdout=second)
    assert first.getvalue() == second.getvalue()
    assert len(first.getvalue()) == 2 * 240

    for argv in (["-v", "-0.1"], ["-d", "-1"], ["-r", "0"], ["-d", "nan"], ["-a", "inf"], ["-v", "nan"]):
        with pytest.raises(SystemExit) as excinfo:
            noisy_cosine.main(argv, stdout=io.BytesIO())
        assert excinfo.value.code == 2


def test_end_to_end_dumps_four_float_files(tmp_path):
    stderr = io.StringIO()
    rc = end_to_end.main(
        ["-r", "8000", "-t", "0.25", "-f", "100", "-v", "0.05",
         "-o", "8", "-d", "8", "-b", "0.05", "--seed", "3",
         "--output-dir", str(tmp_path / "dump"), "--verbose"],
        stderr=stderr,
    )
    assert rc == 0

    files = {name: np.fromfile(tmp_path / "dump" / name, dtype="<f4") for name in end_to_end.OUTPUT_FILES}
    assert all(v.size == 2000 for v in files.values())

    np.testing.assert_allclose(files["tainted.dat"], files["original.dat"] + files["noise.dat"], atol=1e-6)

    expected = NlmsNoiseCanceller(8, 8, 0.05).accept_data(files["tainted.dat"].astype(np.float64))
    np.testing.assert_allclose(files["processed.dat"], expected, atol=1e-4)

    assert "snr_in=" in stderr.getvalue()
    assert "snr_out=" in stderr.getvalue()


@pytest.mark.parametrize(
    "argv",
    [["-t", "inf"], ["-t", "nan"], ["-t", "-1"], ["-f", "nan"], ["-o", "0"], ["-b", "inf"]],
)
def test_end_to_end_rejects_bad_options(argv, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        end_to_end.main(argv + ["--output-dir", str(tmp_path)], stderr=io.StringIO())
    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []
