from setuptools import setup

setup(
	name='johtolog',
	version='0.1',
	description='Membership checking for unrestricted grammars by bounded derivation search',
	author='The Johtolog authors',
	license='GPL',
	classifiers=[
		'Programming Language :: Python :: 3'
	],
	packages=['johtolog'],
	python_requires='>=3.12',
	install_requires=['rich'],
	extras_require={'test': ['pytest']},
	entry_points={'console_scripts': ['johtolog=johtolog.cli:main']},
)
