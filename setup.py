from setuptools import setup, find_packages
setup(
    name='rupaul',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    description='Run a nais app locally with docker-compose and its Vault secrets.',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'requests>=2.25.0',
        'pydantic>=2.0.0',
        'hvac>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'rupaul = rupaul.program:program.run',
        ],
    },
)
