import os
from importlib.resources import files

from configobj import ConfigObj, get_extra_values, ConfigObjError
from validate import Validator


class SettingsError(Exception):
    """
    Settings file that can't be used.

    ``problems`` lists one line per unknown key or bad value.
    """
    def __init__(self, message, problems=()):
        super(SettingsError, self).__init__(message)
        self.problems = list(problems)


class Settings(object):
    """
    Optional user settings, read from ``<root>/settings.conf``.

    A missing file is never created; the defaults from ``settings.spec``
    apply instead.
    """
    def __init__(self, root=None):
        self.__root = root or os.path.expanduser('~/.config/subnet-calc')
        self.__settings = self.__load(os.path.join(self.__root, 'settings.conf'))

    @property
    def root(self):
        return self.__root

    def strict_mask(self):
        return self.__settings['mask']['strict']

    def prompt(self):
        return self.__settings['interactive']['prompt']

    def repeat_prompt(self):
        return self.__settings['interactive']['repeat']

    @staticmethod
    def __load(config_file):
        spec_lines = files('subnetcalc').joinpath('resources').joinpath('settings.spec') \
            .read_text().splitlines()
        source = config_file if os.path.isfile(config_file) else []
        try:
            confobj = ConfigObj(source, configspec=spec_lines, raise_errors=True,
                                interpolation=False)
        except (ConfigObjError, IOError) as e:
            raise SettingsError('Bad config file "%s": %s' % (config_file, e))

        problems = []
        result = confobj.validate(Validator(), preserve_errors=True)
        if result is not True:
            for path, key in _failures(result):
                value = confobj
                try:
                    for k in path + [key]:
                        value = value[k]
                except KeyError:
                    value = '<missing>'
                problems.append('bad value /%s = %s' % ('/'.join(path + [key]), value))
        for path, key in get_extra_values(confobj):
            problems.append('unknown key /%s' % '/'.join(list(path) + [key]))

        if problems:
            raise SettingsError('Unusable config file "%s"' % config_file, problems)
        return confobj


def _failures(result, path=None):
    path = path or []
    for key, item in result.items():
        if isinstance(item, dict):
            for found in _failures(item, path + [key]):
                yield found
        elif item is not True:
            yield path, key
