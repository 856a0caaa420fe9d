from setuptools import setup, find_packages

setup(
    name='speakup-engine',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'colored>=2.2.3',
        'halo>=0.0.31',
        'numpy>=1.26.2',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.4'],
    },
    entry_points='''
        [console_scripts]
        speakup=speakup.__main__:main
    ''',
    license='MIT',
    keywords='speech practice coaching filler words pacing scoring',
    description='Speech analysis and scoring engine for speaking practice',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
