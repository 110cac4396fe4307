from glob import glob
from setuptools import setup


setup(
    name='amareh',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Left-to-right infix calculator',
    url='https://github.com/sudosz/amareh',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['amareh'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'bandit',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
