from setuptools import setup, find_packages

setup(
    name='easyformat',
    version='1.0.0',
    description='Locale-aware date and time formatting from CLDR skeletons with chainable mnemonics.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'babel>=2.12',
        'tabulate',
        'python-dotenv',
        'markdown',
        'tzdata',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'easyformat=easyformat.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['easyformat.env.example'],
    },
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
