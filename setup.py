
SETUP_INFO = dict(
    name = 'infi.aixmount',
    version = '0.1.0.dev0',
    author = 'Guy Rozendorn',
    author_email = 'guy@rzn.co.il',

    url = 'http://www.infinidat.com',
    license = 'PSF',
    description = """Declarative management of AIX filesystem mount points.""",
    long_description = """Converges AIX mount points (crfs, chfs, chnfsmnt, rmfs) to a declared desired state.""",

    # http://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers = [
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: Python Software Foundation License",
        "Operating System :: POSIX :: AIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],

    install_requires = ['infi.execute >= 0.1.8', 'infi.pyutils >= 0.0.20', 'infi.exceptools', 'infi.os_info', ],
    extras_require = {
        'test': ['mock', 'pytest'],
    },

    package_dir = {'': 'src'},
    include_package_data = True,
    zip_safe = False,
    )


def setup():
    from setuptools import setup as _setup
    from setuptools import find_namespace_packages
    SETUP_INFO['packages'] = find_namespace_packages('src', include=['infi.*'])
    _setup(**SETUP_INFO)

if __name__ == '__main__':
    setup()
