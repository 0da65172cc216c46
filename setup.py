from setuptools import setup, find_namespace_packages
from setuptools.command.build_ext import build_ext
import os
import shutil
import sys

root_path = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(root_path, "src")
build_path = os.path.join(root_path, "build_directory")
# Screen optics are evaluated for every screened window at every timestep
cythonize_files = [
    os.path.join(build_path, "heatbal", "construction", "screen.py"),
]

class BuildExtCustom(build_ext):
    def finalize_options(self):
        super().finalize_options()
        # Location of the lib / temp files that are created during the setup process
        self.build_lib = os.path.join(build_path, "cython_build_directory")
        self.build_temp = os.path.join(build_path, "cython_build_directory")

def copy_files_to_build_dir():
    # If build_path exists, remove it for shutil.copytree to work
    if os.path.exists(build_path):
        shutil.rmtree(build_path)
    shutil.copytree(src_path, build_path)

    # Removing all __pycache__ folders and .pyc files
    for root, dirs, files in os.walk(build_path):
        for dir in dirs:
            if dir == '__pycache__':
                pycache_path = os.path.join(root, dir)
                shutil.rmtree(pycache_path)
        for file in files:
            if file.endswith('.pyc'):
                pyc_file = os.path.join(root, file)
                os.remove(pyc_file)

def build_cython_extensions():
    # Cython is only needed for the optional compiled build
    from Cython.Build import cythonize

    print('Create build folder, converting to C')

    copy_files_to_build_dir()

    os.chdir(build_path)

    setup(
        name='heatbal',
        cmdclass={'build_ext': BuildExtCustom},
        ext_modules=cythonize(cythonize_files,
            language_level=3,
            exclude=["**/__init__.py"]
        ),
    )

if __name__ == "__main__":
    if 'build_ext' in sys.argv:
        build_cython_extensions()
    else:
        setup(
            name='heatbal',
            version='0.1.0',
            description='Zone heat balance data core: constructions, window shading and zone equipment',
            package_dir={'': 'src'},
            packages=find_namespace_packages(where='src', include=['heatbal', 'heatbal.*']),
            py_modules=['hbsim'],
            python_requires='>=3.8',
            install_requires=[
                'numpy',
                'scipy>=1.6',
            ],
            extras_require={
                'test': ['pytest'],
                'cython': ['Cython'],
            },
        )
