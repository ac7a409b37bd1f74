from setuptools import setup, find_packages

# Version information
version='0.1.0'

# Read long description from README
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='eztotp',
    version=version,
    description='TOTP verification with scratch codes and replay protection',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='eztotp contributors',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.8',
    install_requires=[
        'cryptography>=41.0.0',
        'pyotp>=2.8.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Topic :: Security',
        'Topic :: Security :: Cryptography',
    ],
)
