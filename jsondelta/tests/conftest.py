# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

from pytest import fixture, skip

from jsondelta import config


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def base_json(filespath):
    with open(pjoin(filespath, "base.json")) as f:
        return json.load(f)


@fixture
def remote_json(filespath):
    with open(pjoin(filespath, "remote.json")) as f:
        return json.load(f)


@fixture
def config_dir(tmpdir, monkeypatch):
    """Run in an empty directory, so only config files written there are found"""
    monkeypatch.chdir(str(tmpdir))
    monkeypatch.setattr(config, 'jupyter_config_path', lambda: [])
    return tmpdir
