import setuptools

setuptools.setup(
    name = 'mfcurve',
    version = '1.0',
    description = 'smooth curves through points with Hobby\'s METAFONT algorithm',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
