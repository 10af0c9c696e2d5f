import dataclasses

import pytest

from insights_api.openapi_parts.helpers import field_schema, schema_object
from insights_api.openapi_parts.models import (
    ApiMetadata, ParameterSpec, ResponseSpec, RouteDescriptor, SchemaDescriptor, SchemaField, ServerEntry,
    TagDescriptor,
)


@pytest.mark.parametrize('title,version', [('', '1.0.0'), ('  ', '1.0.0'), ('API', ''), ('API', 'v1')])
def test_metadata_requires_title_and_semver(title, version):
    with pytest.raises(ValueError):
        ApiMetadata(title=title, version=version)


def test_metadata_accepts_prerelease_version():
    assert ApiMetadata(title='API', version='1.2.0-beta.1').version == '1.2.0-beta.1'


@pytest.mark.parametrize('url', ['localhost:8080', '/api', 'api.stellarinsights.io'])
def test_server_url_must_be_absolute(url):
    with pytest.raises(ValueError):
        ServerEntry(url)


def test_descriptors_are_immutable():
    server = ServerEntry('https://api.stellarinsights.io', 'Production server')
    with pytest.raises(dataclasses.FrozenInstanceError):
        server.url = 'http://localhost'


def test_path_placeholders_must_match_parameters():
    with pytest.raises(ValueError):
        RouteDescriptor(
            method='get', path='/corridors/{corridor_key}', summary='Detail', tags=('Corridors',),
            responses=(ResponseSpec(200, 'OK'),),
        )
    with pytest.raises(ValueError):
        RouteDescriptor(
            method='get', path='/corridors', summary='List', tags=('Corridors',),
            parameters=(ParameterSpec('corridor_key', 'path', required=True),),
            responses=(ResponseSpec(200, 'OK'),),
        )


def test_route_needs_tag_method_and_response():
    with pytest.raises(ValueError):
        RouteDescriptor(method='get', path='/anchors', summary='x', tags=(), responses=(ResponseSpec(200, 'OK'),))
    with pytest.raises(ValueError):
        RouteDescriptor(method='fetch', path='/anchors', summary='x', tags=('Anchors',), responses=(ResponseSpec(200, 'OK'),))
    with pytest.raises(ValueError):
        RouteDescriptor(method='get', path='/anchors', summary='x', tags=('Anchors',), responses=())


def test_route_schema_names_dedupe_in_order():
    route = RouteDescriptor(
        method='post', path='/corridors', summary='x', tags=('Corridors',),
        request_body='CorridorResponse',
        responses=(
            ResponseSpec(200, 'OK', schema='CorridorDetailResponse'),
            ResponseSpec(201, 'Created', schema='CorridorResponse'),
        ),
    )
    assert route.schema_names == ('CorridorResponse', 'CorridorDetailResponse')


def test_path_parameter_must_be_required():
    with pytest.raises(ValueError):
        ParameterSpec('corridor_key', 'path')


@pytest.mark.parametrize('kwargs', [
    {'type': 'map'},
    {'type': 'ref'},
    {'type': 'array'},
    {'type': 'array', 'ref': 'X', 'items': 'string'},
    {'type': 'array', 'items': 'object'},
    {'type': 'string', 'items': 'string'},
    {'type': 'string', 'ref': 'X'},
])
def test_invalid_field_shapes(kwargs):
    with pytest.raises(ValueError):
        SchemaField('f', **kwargs)


def test_schema_rejects_duplicate_fields():
    with pytest.raises(ValueError):
        SchemaDescriptor('X', (SchemaField('a', 'string'), SchemaField('a', 'integer')))


def test_schema_object_marks_optional_fields():
    schema = SchemaDescriptor('CorridorDetailResponse', (
        SchemaField('corridor', 'ref', ref='CorridorResponse'),
        SchemaField('related_corridors', 'array', optional=True, ref='CorridorResponse'),
        SchemaField('tags', 'array', items='string'),
        SchemaField('note', 'string', optional=True, description='Free text'),
    ))
    out = schema_object(schema)
    assert out['required'] == ['corridor', 'tags']
    assert out['properties']['corridor'] == {'$ref': '#/components/schemas/CorridorResponse'}
    assert out['properties']['related_corridors']['items'] == {'$ref': '#/components/schemas/CorridorResponse'}
    assert out['properties']['tags'] == {'type': 'array', 'items': {'type': 'string'}}
    assert out['properties']['note'] == {'type': 'string', 'description': 'Free text', 'nullable': True}
    assert schema.references == ('CorridorResponse',)


def test_described_ref_field_wraps_in_all_of():
    out = field_schema(SchemaField('corridor', 'ref', ref='CorridorResponse', description='Summary'))
    assert out == {'allOf': [{'$ref': '#/components/schemas/CorridorResponse'}], 'description': 'Summary'}


def test_route_rejects_repeated_response_status():
    with pytest.raises(ValueError):
        RouteDescriptor(
            method='get', path='/anchors', summary='x', tags=('Anchors',),
            responses=(ResponseSpec(200, 'OK', schema='A'), ResponseSpec(200, 'Also OK', schema='B')),
        )


def test_path_key_erases_placeholder_names():
    def detail(param):
        return RouteDescriptor(
            method='get', path=f'/corridors/{{{param}}}', summary='x', tags=('Corridors',),
            parameters=(ParameterSpec(param, 'path', required=True),),
            responses=(ResponseSpec(200, 'OK'),),
        )
    assert detail('key').path_key == detail('id').path_key == '/corridors/{}'


@pytest.mark.parametrize('name', ['', '   '])
def test_tag_name_must_not_be_empty(name):
    with pytest.raises(ValueError):
        TagDescriptor(name)
