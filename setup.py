from glob import glob
from setuptools import setup


setup(
    name='infix',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Infix arithmetic calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    packages=['infix'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
