"""
Sample Tree Module

Builds the sample directories and text files the desktop shows on
start-up. The tree lives in memory only, so it is rebuilt on every run.

Author: YSNRFD
Version: 1.0.0
"""

from typing import List, Tuple

from .vfs import VirtualFileSystem, OVERWRITE
from deskfs.logger import get_logger


SAMPLE_DIRECTORIES: List[str] = [
    'years',
    'months',
    'seasons',
    'weeks',
    'years/2023',
    'years/atelier',
    'years/A',
    'years/seasons',
    'years/2023/cmsc142',
    'years/2023/cmsc141',
    'years/2023/sts40',
    'years/2023/cmsc198.1',
    'years/seasons/txt',
    'years/seasons/images',
    'years/seasons/sounds',
    'years/seasons/cmsc142',
    'years/seasons/cmsc141',
    'months/2023',
    'months/2023/september',
    'seasons/2023',
    'seasons/2023/autumn',
    'weeks/2023',
    'weeks/2023/36th',
    'weeks/2023/36th/aw23',
    'weeks/2023/36th/aw23/september',
    'weeks/2023/36th/aw23/september/fourth',
    'weeks/2023/36th/aw23/september/fifth',
    'weeks/2023/36th/aw23/september/fourth/11thhour',
    'weeks/2023/36th/aw23/september/fourth/11thhour/59thminute',
    'weeks/2023/36th/aw23/september/fourth/11thhour/59thminute/59thsecond',
]

SAMPLE_FILES: List[Tuple[str, str]] = [
    (
        'weeks/2023/36th/aw23/september/fourth/11thhour/59thminute/59thsecond/rootfile.txt',
        'the site is now live',
    ),
    ('years/seasons/cmsc141/autumnwinter.txt', 'AW23 teaser \n lookbook to follow'),
    ('years/seasons/cmsc142/audio.txt', 'AW23 Soundtrack \n \n runway mix'),
    ('years/2023/cmsc142/autumnwinter.txt', 'AW23 teaser \n lookbook to follow'),
    ('years/2023/cmsc142/audio.txt', 'AW23 Soundtrack \n \n runway mix'),
    (
        'years/seasons/txt/colour.txt',
        'AW23 Colour palette \n'
        ' Raisin black 30292f\n'
        ' English Violet 413f54\n'
        ' Ultra Violet 5f5aa2\n'
        ' YInMn Blue 355691\n'
        ' Onyx 3f4045',
    ),
    (
        'years/seasons/txt/order.txt',
        'Olives\t4.80 \n Celeriac Soup\t11.00\n Potted Pork\t12.50',
    ),
    (
        'years/seasons/sounds/announcement.txt',
        'Our inaugural collection will be revealed in September.',
    ),
]


def populate_sample_tree(vfs: VirtualFileSystem) -> VirtualFileSystem:
    """
    Create the sample directories and files.

    Paths are relative to the root regardless of the default session's
    working directory.

    Args:
        vfs: Filesystem to populate

    Returns:
        The same filesystem
    """
    logger = get_logger('seed')
    session = vfs.open_session(name='seed')

    try:
        for path in SAMPLE_DIRECTORIES:
            vfs.mkdir(path, session=session)

        for path, contents in SAMPLE_FILES:
            vfs.cat(OVERWRITE, path, contents, session=session)
    finally:
        vfs.close_session(session)

    logger.info(
        "Sample tree created",
        context={'directories': len(SAMPLE_DIRECTORIES), 'files': len(SAMPLE_FILES)}
    )

    return vfs
