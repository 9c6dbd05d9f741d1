import setuptools
import os

name = 'gem_json'
dirname = os.path.dirname(__file__)


def read_requirements(path):
    """ Read the requirements of the package from a requirements file """
    requirements = []
    with open(os.path.join(dirname, path), 'r') as file:
        for line in file:
            line = line.partition('#')[0].strip()
            if line:
                requirements.append(line)
    return requirements


# get package metadata
about = {}
with open(os.path.join(dirname, name, '_version.py'), 'r') as file:
    exec(file.read(), about)

with open(os.path.join(dirname, 'README.md'), 'r') as file:
    long_description = file.read()

# install package
setuptools.setup(
    name='gem-json',
    version=about['__version__'],
    description="Conversion of genome-scale metabolic models from COBRA/BiGG JSON to SBML",
    long_description=long_description,
    long_description_content_type='text/markdown',
    url="https://github.com/KarrLab/" + name,
    download_url='https://github.com/KarrLab/' + name,
    author="Jonathan Karr",
    author_email="jonrkarr@gmail.com",
    license="MIT",
    keywords='genome-scale metabolic model systems biology SBML COBRA',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    package_data={
        name: [
            'config/core.default.cfg',
            'config/core.schema.cfg',
        ],
    },
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'tests': read_requirements('tests/requirements.txt'),
    },
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    entry_points={
        'console_scripts': [
            'gem-json = gem_json.__main__:main',
        ],
    },
)
