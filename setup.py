from setuptools import setup, find_packages

setup(
    name="pydaptivecanceller",
    packages=find_packages(
        include=["pydaptivecanceller", "pydaptivecanceller.*"]),
    version='0.1.0',
    description="Single-channel adaptive noise cancellation with a Normalized LMS filter.",
    keywords=["Adaptive", "Filtering", "NLMS", "Noise", "Cancellation", "Signal", "Processing"],
    python_requires=">=3.8",
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
        'plot': ['matplotlib'],
    },
    entry_points={
        'console_scripts': [
            'pydaptive-noise-canceller=pydaptivecanceller.apps.noise_canceller:main',
            'pydaptive-noisy-cosine=pydaptivecanceller.apps.noisy_cosine:main',
            'pydaptive-system-test=pydaptivecanceller.apps.end_to_end:main',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3'
    ]

)
