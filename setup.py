from setuptools import setup

setup(name='ecelgamal',
      version='0.1',
      description='elliptic curve arithmetic over prime fields with ElGamal encryption and Diffie-Hellman',
      license='MIT',
      packages=['ecelgamal'],
      python_requires='>=3.8',
      install_requires=[
          'pytictoc',
          'numpy',  # 'math', 'secrets', 'argparse'
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': ['ecdemo=ecelgamal.command_line:cmd_ecdemo',
                              'ecpoints=ecelgamal.command_line:cmd_ecpoints',
                              'eckeygen=ecelgamal.command_line:cmd_eckeygen']
      },
      zip_safe=False)
