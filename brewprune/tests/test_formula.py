"""Tests for brew info JSON decoding"""

import pytest

from brewprune.core.errors import BrewDecodeError
from brewprune.core.formula import Formula


def make_record(**overrides):
    record = {
        'name': 'wget',
        'full_name': 'wget',
        'oldnames': [],
        'aliases': [],
        'dependencies': ['libidn2', 'openssl@3'],
        'build_dependencies': ['pkgconf'],
        'versions': {'stable': '1.24.5', 'head': None, 'bottle': True},
        'installed': [
            {
                'version': '1.24.5',
                'runtime_dependencies': [
                    {'full_name': 'libidn2', 'version': '2.3.7', 'declared_directly': True},
                    {'full_name': 'libunistring', 'version': '1.2', 'declared_directly': False},
                ],
                'installed_on_request': True,
            }
        ],
    }
    record.update(overrides)
    return record


class TestFormulaFromJson:
    """Tests for Formula.from_json."""

    def test_full_record(self):
        formula = Formula.from_json(make_record())
        assert formula.full_name == 'wget'
        assert formula.dependencies == ['libidn2', 'openssl@3']
        assert formula.build_dependencies == ['pkgconf']
        assert formula.bottle is True
        assert len(formula.installed) == 1
        assert formula.installed[0].runtime_dependencies == ['libidn2', 'libunistring']

    def test_oldnames(self):
        formula = Formula.from_json(make_record(oldnames=['wget-old']))
        assert formula.oldnames == ['wget-old']

    def test_no_installed_versions(self):
        formula = Formula.from_json(make_record(installed=[]))
        assert formula.installed == []

    def test_missing_field(self):
        record = make_record()
        del record['build_dependencies']
        with pytest.raises(BrewDecodeError, match='build_dependencies'):
            Formula.from_json(record)

    def test_missing_bottle_flag(self):
        with pytest.raises(BrewDecodeError, match='bottle'):
            Formula.from_json(make_record(versions={'stable': '1.0'}))

    def test_bottle_must_be_bool(self):
        with pytest.raises(BrewDecodeError):
            Formula.from_json(make_record(versions={'bottle': 1}))

    def test_dependencies_must_be_strings(self):
        with pytest.raises(BrewDecodeError):
            Formula.from_json(make_record(dependencies=['ok', 42]))

    def test_null_runtime_dependencies(self):
        record = make_record(installed=[{'version': '1.0', 'runtime_dependencies': None}])
        with pytest.raises(BrewDecodeError, match='runtime_dependencies'):
            Formula.from_json(record)

    def test_runtime_dependency_without_full_name(self):
        record = make_record(installed=[{'runtime_dependencies': [{'version': '1.0'}]}])
        with pytest.raises(BrewDecodeError, match='full_name'):
            Formula.from_json(record)

    def test_record_not_an_object(self):
        with pytest.raises(BrewDecodeError):
            Formula.from_json(['wget'])
