import numpy as np
import pytest

from pydaptivecanceller import NlmsNoiseCanceller
from pydaptivecanceller._utils.pcm import to_int16


def test_accept_data_preserves_order_and_count(white_signal):
    block = NlmsNoiseCanceller(6, 6, 0.2)
    sample = NlmsNoiseCanceller(6, 6, 0.2)

    y_block = block.accept_data(white_signal)
    y_sample = np.array([sample.filter_data(v) for v in white_signal])

    assert y_block.shape == white_signal.shape
    assert y_block.dtype == np.float64
    np.testing.assert_array_equal(y_block, y_sample)


def test_block_boundaries_do_not_matter(white_signal):
    whole = NlmsNoiseCanceller(5, 5, 0.1).accept_data(white_signal)

    chunked = NlmsNoiseCanceller(5, 5, 0.1)
    pieces = [chunked.accept_data(white_signal[i : i + 37]) for i in range(0, white_signal.size, 37)]

    np.testing.assert_array_equal(np.concatenate(pieces), whole)


def test_length_limits_the_processed_prefix(white_signal):
    canceller = NlmsNoiseCanceller(4, 4, 0.1)
    y = canceller.accept_data(white_signal, 10)
    assert y.shape == (10,)

    reference = NlmsNoiseCanceller(4, 4, 0.1).accept_data(white_signal[:10])
    np.testing.assert_array_equal(y, reference)

    assert NlmsNoiseCanceller(4, 4, 0.1).accept_data(white_signal, 0).shape == (0,)

    with pytest.raises(ValueError):
        canceller.accept_data(white_signal[:5], 6)
    with pytest.raises(ValueError):
        canceller.accept_data(white_signal, -1)


def test_pcm_block_is_cast_back_to_int16(pcm_signal):
    pcm = NlmsNoiseCanceller(5, 5, 0.1)
    flt = NlmsNoiseCanceller(5, 5, 0.1)

    y_pcm = pcm.accept_data(pcm_signal)
    y_flt = flt.accept_data(pcm_signal.astype(np.float64))

    assert y_pcm.dtype == np.int16
    assert y_pcm.shape == pcm_signal.shape
    np.testing.assert_array_equal(y_pcm, to_int16(y_flt))

    # both representations drive identical internal state
    np.testing.assert_array_equal(pcm.w, flt.w)
    np.testing.assert_array_equal(pcm.state, flt.state)


def test_python_int_lists_are_treated_as_pcm():
    y = NlmsNoiseCanceller(1, 1, 1.0).accept_data([100, 100, 100])
    assert y.dtype == np.int16
    # third estimate is 100 / (1 + 1e-4 / 1e4) truncated toward zero
    np.testing.assert_array_equal(y, [0, 0, 99])


def test_to_int16_truncates_and_saturates():
    out = to_int16([1.9, -1.9, 0.4, 40000.0, -40000.0, np.nan, np.inf])
    assert out.dtype == np.int16
    np.testing.assert_array_equal(out, [1, -1, 0, 32767, -32768, 0, 32767])


def test_accept_data_rejects_complex():
    with pytest.raises(TypeError):
        NlmsNoiseCanceller(2, 1, 0.1).accept_data(np.ones(4) * 1j)
