"""wrapio PiP Installer"""

from setuptools import setup, find_packages

import os.path
here = os.path.abspath(os.path.dirname(__file__))
major, minor, micro = 0, 0, 0
exec(open(os.path.join(here, 'wrapio/version.py')).read())


setup(
    name='wrapio',
    version='%s.%s.%s' % (major, minor, micro),
    description='Decorating wrappers for byte and character streams',
    long_description="Bounded, pushback, tee, delegating, null and broken wrappers around byte "
                     "streams and character readers/writers, plus adapters to Python file objects.",
    license='LGPL-2.1-or-later',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='io stream reader writer pushback bounded tee wrapper',
    packages=find_packages(exclude=['docs', 'pipelines', 'unittests']),
    install_requires=[],
    python_requires=">=3.8",
)
