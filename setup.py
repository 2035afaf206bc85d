import setuptools

setuptools.setup(
	name='paramparse',
	version='0.1.0',
	packages=[
		'paramparse',
	],
	description='Positional, typed argument binding: declare what you expect, then bind what you got',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Libraries",
		"Development Status :: 3 - Alpha",
	],
)
