from setuptools import setup

setup(
    name='npchunker',
    version="1.0.0",
    description="Noun phrase chunking with an error recovering Earley parser",
    long_description="""npchunker extracts noun phrases from part-of-speech tagged Swedish text.
    Each sentence is parsed with an Earley chart parser against a fixed phrase grammar,
    recovering from ungrammatical input, and noun phrases are read out of the derivation tree.""",
    license="MIT",
    classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Topic :: Text Processing :: Linguistic',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3',
        ],
    keywords='earley parser natural language chunking noun phrase',
    packages=["npchunker"],
    python_requires=">=3.5",
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["npchunker = npchunker.__main__:main"],
    },
)
