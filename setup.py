from setuptools import setup

setup(
    name="subnet-calc",
    version="0.1.0",
    description="IPv4 subnet mask and network address calculator",
    license='MIT',
    packages=['subnetcalc'],
    entry_points={
        "console_scripts": [
            "subnet=subnetcalc.cli:main",
        ]
    },
    install_requires=[
        'ConfigObj>=5.0.6',
    ],
    extras_require={
        'test': ['pytest'],
    },
    package_data={
        'subnetcalc': ['resources/*'],
    },
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
    ],
    platforms=[]
)
