from setuptools import setup

setup(
    name='nickserv',
    version='0.1.0',
    packages=[
        'nickserv',
        'nickserv.utils'
    ],
    install_requires=[],
    extras_require={
        'tests': 'pytest',             # collect and run tests
        'coverage': 'pytest-cov'       # get test case coverage
    },
    entry_points={
        'console_scripts': [
            'nickserv-identify = nickserv.utils.run:main',
            'nickserv-profiles = nickserv.utils.profiles:main'
        ]
    },

    keywords='irc nickserv services identify authentication python3',
    description='Automatic NickServ identification for IRC clients.',
    license='BSD',
    python_requires='>=3.7',

    zip_safe=True,
    test_suite='tests'
)
