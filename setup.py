from setuptools import setup

setup(
    name='qrab',
    version='0.1.0',
    description='Extract URLs from piped text and display QR codes in the terminal',
    author='qrab contributors',
    package_dir={'qrab': 'src/qrab'},
    packages=['qrab', 'qrab.cli', 'qrab.renderer'],
    include_package_data=True,
    python_requires='>=3.10',
    install_requires=[
        'click>=8.2',
        'rich>=13.0',
        'qrcode>=7.4',
        'linkify-it-py>=2.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'qrab = qrab.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Environment :: Console',
    ],
)
