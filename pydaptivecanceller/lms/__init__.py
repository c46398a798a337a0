# lms.__init__.py

from .nlms_canceller import NLMS_EPSILON, NlmsNoiseCanceller

__all__ = ["NlmsNoiseCanceller", "NLMS_EPSILON"]
