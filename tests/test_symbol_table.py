"""Tests for merging definition files into one symbol table."""

import pytest

from tfvarsub.exceptions import MalformedLine
from tfvarsub.symbols import build_symbol_table, merge_tables
from tfvarsub.values import NumberValue, ObjectValue, StringValue


class TestMergeTables:
    """Last-writer-wins merging."""

    def test_merge_is_order_sensitive(self):
        first = {'a': NumberValue(1.0)}
        second = {'a': NumberValue(2.0)}

        assert merge_tables([first, second]) == {'a': NumberValue(2.0)}
        assert merge_tables([second, first]) == {'a': NumberValue(1.0)}

    def test_disjoint_keys_combined(self):
        merged = merge_tables([{'a': StringValue('x')}, {'b': StringValue('y')}])
        assert merged == {'a': StringValue('x'), 'b': StringValue('y')}

    def test_objects_replaced_not_deep_merged(self):
        first = {'cfg': ObjectValue({'a': StringValue('1'), 'b': StringValue('2')})}
        second = {'cfg': ObjectValue({'a': StringValue('3')})}
        assert merge_tables([first, second]) == {'cfg': ObjectValue({'a': StringValue('3')})}

    def test_inputs_not_modified(self):
        first = {'a': NumberValue(1.0)}
        merge_tables([first, {'a': NumberValue(2.0)}])
        assert first == {'a': NumberValue(1.0)}


class TestBuildSymbolTable:
    """Parsing and merging files from disk."""

    def test_files_merged_in_given_order(self, tmp_path):
        base = tmp_path / 'base.tfvars'
        base.write_text('region = "us-east-1"\ncount = 1\n')
        override = tmp_path / 'override.tfvars'
        override.write_text('count = 2\n')

        table = build_symbol_table([base, override])

        assert table == {'region': StringValue('us-east-1'), 'count': NumberValue(2.0)}

    def test_parse_error_aborts_build(self, tmp_path):
        good = tmp_path / 'good.tfvars'
        good.write_text('a = 1\n')
        bad = tmp_path / 'bad.tfvars'
        bad.write_text('foo bar\n')

        with pytest.raises(MalformedLine):
            build_symbol_table([good, bad])

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_symbol_table([tmp_path / 'missing.tfvars'])
