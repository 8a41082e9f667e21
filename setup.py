import setuptools

setuptools.setup(
	name='rexparse',
	version='0.1.0',
	packages=[
		'rexparse.json_value',
		'rexparse.scanning',
		'rexparse.support',
	],
	description='Declarative regex-driven tokenizing with context-threading actions, plus a JSON value assembler',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
