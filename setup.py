from setuptools import find_packages, setup

# Minimal setup.py to allow pip installation in environments (like p4a) that
# default to legacy builds and need explicit python_requires plus py_modules
# for the top-level buildozer entrypoint.

package_list = find_packages(
  include=[
    "bootstrap",
    "bootstrap.*",
    "entrypoints",
    "entrypoints.*",
    "os_interfaces",
    "os_interfaces.*",
    "sharing",
    "sharing.*",
  ]
)

setup(
  name="sharelaunch",
  version="0.1.0",
  description="App shell that shows one screen and registers sharing platforms at launch",
  python_requires=">=3.11",
  packages=package_list,
  py_modules=["main"],
  include_package_data=True,
  install_requires=[
    "pywebview",
    "pyyaml",
    "pydantic>=2",
    "python-dotenv",
    "platformdirs",
  ],
  extras_require={
    "android": ["pyjnius", "cython==3.0.12", "buildozer"],
    "dev": ["pytest", "pytest-asyncio", "pytest-cov"],
  },
  entry_points={
    "console_scripts": [
      "sharelaunch=entrypoints.launch_linux:main",
    ],
  },
)
