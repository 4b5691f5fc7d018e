from setuptools import find_packages, setup

package_name = 'inspection_formation'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyYAML', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Overrack Robotics',
    maintainer_email='support@overrack.ai',
    description='Inspection formation goal geometry for multi-vehicle close-range inspection.',
    license='Apache-2.0',
    entry_points={
        'console_scripts': [
            'inspection-formation = inspection_formation.tools:main',
        ],
    },
)
