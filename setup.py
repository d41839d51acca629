from setuptools import setup, find_packages
import logging
import datetime as dt
logger = logging.getLogger('sitelogs.setup')
stream = logging.StreamHandler()
stream.setLevel(logging.INFO)
logger.setLevel(logging.INFO)
form = logging.Formatter('%(asctime)-15s %(name)-25s %(levelname)s - %(threadName)s %(message)s',
                         '%Y-%m-%d %H:%M:%S')
stream.setFormatter(form)
logger.addHandler(stream)
date = dt.date.today().strftime('%y%m%d')

if __name__ == '__main__':
    setup(
        name='sitelogs',
        version=f'0.0.post{date}',
        packages=find_packages(include=['sitelogs', 'sitelogs.*']),
        license='',
        author='',
        author_email='',
        description='Build IGS GNSS site logs from the delta network and install tables',
        python_requires='>=3.9',
        install_requires=['numpy', 'pandas', 'geopandas', 'shapely', 'country_converter', 'tqdm'],
        extras_require={'test': ['pytest']},
        entry_points={'console_scripts': ['sitelogs-build = sitelogs.cli:main']}
    )
