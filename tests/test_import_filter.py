"""Import filter tests."""

from config_scanner.core.scanner.models import ScanConfig
from config_scanner.core.scanner.ts_ast import uses_service

from tests.helpers import parse_ts


def test_named_import_of_service_is_in_scope():
    source = parse_ts("import { EtcdService } from './etcd.service';\n")
    assert uses_service(source)


def test_config_service_import_is_in_scope():
    source = parse_ts("import { ConfigService } from '@nestjs/config';\n")
    assert uses_service(source)


def test_aliased_import_still_matches():
    source = parse_ts("import { EtcdService as Store } from './etcd';\n")
    assert uses_service(source)


def test_substring_of_longer_identifier_matches():
    source = parse_ts("import { MyConfigServiceFactory } from './factory';\n")
    assert uses_service(source)


def test_module_path_mentioning_service_matches():
    source = parse_ts("import * as cfg from './ConfigService';\n")
    assert uses_service(source)


def test_unrelated_imports_are_out_of_scope():
    source = parse_ts("""
        import { Injectable } from '@nestjs/common';
        import express from 'express';
    """)
    assert not uses_service(source)


def test_service_name_outside_imports_is_ignored():
    source = parse_ts("""
        import { Injectable } from '@nestjs/common';
        // EtcdService is wired elsewhere
        const name = 'ConfigService';
    """)
    assert not uses_service(source)


def test_file_without_imports_is_out_of_scope():
    assert not uses_service(parse_ts("const x = etcd.get('UNUSED');\n"))


def test_custom_service_catalog():
    source = parse_ts("import { VaultClient } from './vault';\n")
    assert not uses_service(source)
    assert uses_service(source, ScanConfig(service_types=("VaultClient",)))


def test_import_equals_require_is_not_an_import_declaration():
    source = parse_ts("import EtcdService = require('./etcd');\n")
    assert not uses_service(source)


def test_type_only_import_is_in_scope():
    source = parse_ts("import type { ConfigService } from '@nestjs/config';\n")
    assert uses_service(source)
