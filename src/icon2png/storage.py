from contextlib import contextmanager
from logging import getLogger
import os
from tempfile import TemporaryFile
from urllib.error import HTTPError
from urllib.parse import urljoin, urlparse
from urllib.request import Request, urlopen


logger = getLogger(__name__)

# Subdirectory of the download folder used when no output folder is configured.
DEFAULT_FOLDER_NAME = 'Download_Icon'

USER_AGENT = 'icon2png'


def get_storage(dirname, **kwargs):
    result = urlparse(dirname)
    if result.scheme in ('http', 'https'):
        return UrlStorage(dirname, **kwargs)
    return FileSystemStorage(dirname)


def read_svg(location):
    """Read SVG text from a local path or an http(s) URL."""
    result = urlparse(location)
    if result.scheme in ('http', 'https'):
        dirname, _, name = location.rpartition('/')
    else:
        dirname, name = os.path.split(location)
    return get_storage(dirname).get(name).decode('utf-8')


def save_icon_file(file_path, content):
    """Write icon bytes or text to ``file_path``, creating parent directories."""
    dirname, filename = os.path.split(file_path)
    storage = FileSystemStorage(dirname)
    if isinstance(content, str):
        storage.put(filename, content.encode('utf-8'))
    else:
        storage.put(filename, content)


def get_download_dir():
    """Return the user download directory for this platform."""
    xdg_dir = os.environ.get('XDG_DOWNLOAD_DIR')
    if xdg_dir:
        return os.path.expandvars(os.path.expanduser(xdg_dir))
    home = os.path.expanduser('~')
    if home == '~':
        raise OSError('Cannot resolve the user home directory')
    return os.path.join(home, 'Downloads')


def default_export_folder(base=None):
    """Ensure ``<download dir>/Download_Icon`` exists and return its path.

    Args:
        base: Parent directory to use instead of the download directory.

    Raises:
        OSError: If the download directory cannot be resolved or the folder
            cannot be created.
    """
    folder = os.path.join(base or get_download_dir(), DEFAULT_FOLDER_NAME)
    if os.path.isdir(folder):
        logger.debug('{} folder already exists at: {}'.format(
            DEFAULT_FOLDER_NAME, folder))
    else:
        os.makedirs(folder, exist_ok=True)
        logger.info('Created {} folder at: {}'.format(
            DEFAULT_FOLDER_NAME, folder))
    return folder


class _BaseStorage(object):
    def open(self, key):
        raise NotImplementedError

    def get(self, key):
        raise NotImplementedError

    def exists(self, key):
        raise NotImplementedError

    def put(self, key, value):
        raise NotImplementedError

    def url(self, path=''):
        raise NotImplementedError


class FileSystemStorage(_BaseStorage):
    def __init__(self, path):
        self.basedir = path
        if not self.basedir:
            self.basedir = '.'

    def _ensure_dir(self, dirname):
        if dirname and not os.path.exists(dirname):
            logger.debug('Creating {}'.format(dirname))
            os.makedirs(dirname, exist_ok=True)

    @contextmanager
    def open(self, filename, mode='rb'):
        path = os.path.join(self.basedir, filename)
        if mode.startswith('w'):
            self._ensure_dir(os.path.dirname(path))
        with open(path, mode) as f:
            yield f

    def get(self, filename, mode='rb'):
        with self.open(filename, mode=mode) as f:
            return f.read()

    def exists(self, filename):
        return os.path.exists(os.path.join(self.basedir, filename))

    def put(self, filename, value, mode='wb'):
        with self.open(filename, mode=mode) as f:
            f.write(value)

    def url(self, path=''):
        return os.path.abspath(os.path.join(self.basedir, path))


class UrlStorage(_BaseStorage):
    def __init__(self, base_url, timeout=30):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = timeout

    def _request(self, path, method='GET'):
        return Request(self.url(path), method=method,
                       headers={'User-Agent': USER_AGENT})

    @contextmanager
    def open(self, path, mode='rb'):
        if not mode.startswith('r'):
            raise ValueError('Unsupported mode {}'.format(mode))
        with TemporaryFile() as f:
            with urlopen(self._request(path), timeout=self.timeout) as response:
                f.write(response.read())
            f.seek(0)
            yield f

    def get(self, path):
        with self.open(path) as f:
            return f.read()

    def exists(self, path):
        exists = True
        try:
            with urlopen(self._request(path, method='HEAD'),
                         timeout=self.timeout):
                pass
        except HTTPError:
            exists = False
        return exists

    def url(self, path=''):
        return urljoin(self.base_url, path)
