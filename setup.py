from glob import glob
from setuptools import setup


setup(
    name='prefix-calc',
    version='0.1.0',
    description='Prefix notation calculator',
    url='https://github.com/pilona/RPN',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['prefix'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    author='Alex Pilon',
    author_email='alp@alexpilon.ca',
    license='ISC',
)
