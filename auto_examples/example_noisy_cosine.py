#################################################################################
#                     Example: Noise Cancellation of a Cosine                   #
#################################################################################
#                                                                               #
#  A cosine buried in white Gaussian noise is cleaned by an NLMS canceller      #
# that uses a delayed copy of its own input as reference. The procedure is:     #
# 1)  Generate the clean cosine s and the noise n; the canceller only sees      #
#   x = s + n.                                                                  #
# 2)  The reference d[k] = x[k - D] is built inside the canceller. Only the     #
#   cosine is predictable across D samples, so the output y[k] converges to    #
#   s[k - D] while the noise stays in the error e[k].                           #
# 3)  Compare the SNR at the input with the SNR at the output.                  #
#                                                                               #
#     Adaptive Algorithm used here: NLMS (delayed reference)                    #
#                                                                               #
#################################################################################

# Imports
import numpy as np
from pydaptivecanceller import NlmsNoiseCanceller, SignalConfig
from pydaptivecanceller._utils.metrics import snr_db
from pydaptivecanceller._utils.sources import noisy_cosine


def main(seed: int = 0, plot: bool = True) -> dict:
    # 1. Experiment Parameters
    cfg = SignalConfig(amplitude=0.5, frequency=200.0, sample_rate=24000.0,
                       duration=0.5, noise_variance=0.1, seed=seed)
    filter_length = 16
    delay = 16        # must be >= filter_length, otherwise y = x[k - D] is trivially optimal
    beta = 0.01
    discard = 2000  # transient left out of the SNR figures

    # 2. Signal Generation
    clean, noise = noisy_cosine(cfg)
    x = clean + noise

    # 3. NLMS Execution
    canceller = NlmsNoiseCanceller(filter_length, delay, beta)
    results = canceller.process(x, verbose=True)

    delayed_clean = np.concatenate((np.zeros(delay), clean))[: clean.size]
    snr_in = snr_db(clean[discard:], x[discard:])
    snr_out = snr_db(delayed_clean[discard:], results.outputs[discard:])

    print("-" * 50)
    print(f"SNR in : {snr_in:6.2f} dB")
    print(f"SNR out: {snr_out:6.2f} dB")
    print("-" * 50)

    MSE_av = results.mse()

    # 4. Graphical Visualization
    if plot:
        import matplotlib.pyplot as plt

        plt.figure(figsize=(12, 8))

        ax1 = plt.subplot(2, 1, 1)
        ax1.plot(x[-400:], color='gray', alpha=0.5, label='Noisy input (x)')
        ax1.plot(delayed_clean[-400:], 'k--', label='Delayed clean cosine')
        ax1.plot(results.outputs[-400:], 'b', label='Canceller output (y)')
        ax1.set_title('NLMS Noise Canceller (Last 400 Samples)')
        ax1.legend()
        ax1.grid(True, alpha=0.3)

        ax2 = plt.subplot(2, 1, 2)
        ax2.plot(10 * np.log10(MSE_av + 1e-12))
        ax2.set_title('Learning Curve: squared error [dB]')
        ax2.set_ylabel('dB')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.show()

    return {"MSE_av": MSE_av, "snr_in": snr_in, "snr_out": snr_out}


if __name__ == "__main__":
    main()
