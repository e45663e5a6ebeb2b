"""
Setup file for microwave
"""

from setuptools import setup, find_packages

setup(
    name='microwave-simulator',
    version='0.1.0',
    description="""
    A microwave oven you can open, close, start and stop from a terminal.
    """.strip(),
    packages=find_packages(exclude=["docs", "docs.*"]),
    package_dir={'microwave': 'microwave'},
    python_requires=">=3.8",
    install_requires=[
        "attrs>=22.2.0",
    ],
    extras_require={
        "visualize": ["graphviz>=0.20"],
        "test": ["pytest", "graphviz>=0.20"],
    },
    entry_points={
        "console_scripts": [
            "microwave = microwave._harness:main",
            "microwave-visualize = microwave._visualize:tool",
        ],
    },
    include_package_data=True,
    license="MIT",
    keywords='microwave fsm finite state machine simulator',
    classifiers=[
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
