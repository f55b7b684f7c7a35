from setuptools import find_packages, setup


extras_require = {}

extras_require["data-common"] = [
    'DBUtils>=3.1,<4.0'
]

extras_require["data-mysql"] = [
    'PyMySQL>=1.1.1,<1.2',
]

extras_require["data-postgres"] = [
    'psycopg2-binary>=2.9.10,<3.0'
]

extras_require["data"] = [
    *extras_require["data-common"],
    *extras_require["data-mysql"],
    *extras_require["data-postgres"],
]

extras_require["test"] = [
    'pytest>=7.4',
    *extras_require["data"],
]

extras_require["all"] = [
    *extras_require["data"],
]


setup(
    name='serialized-lob',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    description='Persist a customer department tree as a markup LOB in one relational column',
    entry_points={
        'console_scripts': [
            'serialized-lob = serialized_lob.cli:main',
        ],
    },
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'python-dotenv>=1.0.0,<2.0'
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
