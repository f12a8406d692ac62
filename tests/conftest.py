"""
Shared test fixtures for the WFS catalog test suite.

Provides:
  - Async test client for FastAPI integration tests
  - Sample GetCapabilities documents (XML and parsed tree)
  - A clean capabilities cache for every test
"""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from wfs_catalog.domain.capabilities import WebFeatureServiceCapabilities
from wfs_catalog.main import app


SAMPLE_CAPABILITIES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<wfs:WFS_Capabilities version="2.0.0"
    xmlns:wfs="http://www.opengis.net/wfs/2.0"
    xmlns:ows="http://www.opengis.net/ows/1.1"
    xmlns:xlink="http://www.w3.org/1999/xlink">
  <ows:ServiceIdentification>
    <ows:Title>Basiskaart</ows:Title>
    <ows:Abstract>Roads and rivers of the test area</ows:Abstract>
    <ows:Keywords>
      <ows:Keyword>roads</ows:Keyword>
      <ows:Keyword>rivers</ows:Keyword>
    </ows:Keywords>
    <ows:ServiceType>WFS</ows:ServiceType>
    <ows:Fees>NONE</ows:Fees>
    <ows:AccessConstraints>NONE</ows:AccessConstraints>
  </ows:ServiceIdentification>
  <ows:ServiceProvider>
    <ows:ProviderName>Gemeente Voorbeeld</ows:ProviderName>
    <ows:ServiceContact>
      <ows:IndividualName>J. Jansen</ows:IndividualName>
      <ows:PositionName>GIS officer</ows:PositionName>
      <ows:ContactInfo>
        <ows:Phone>
          <ows:Voice>+31 20 000 0000</ows:Voice>
        </ows:Phone>
        <ows:Address>
          <ows:DeliveryPoint>Stadhuisplein 1</ows:DeliveryPoint>
          <ows:City>Amsterdam</ows:City>
          <ows:PostalCode>1000 AA</ows:PostalCode>
          <ows:Country>Netherlands</ows:Country>
          <ows:ElectronicMailAddress>gis@example.com</ows:ElectronicMailAddress>
        </ows:Address>
      </ows:ContactInfo>
    </ows:ServiceContact>
  </ows:ServiceProvider>
  <wfs:FeatureTypeList>
    <wfs:FeatureType>
      <wfs:Name>ns:Roads</wfs:Name>
      <wfs:Title>Roads</wfs:Title>
      <wfs:Abstract>All public roads</wfs:Abstract>
      <ows:Keywords>
        <ows:Keyword>roads</ows:Keyword>
      </ows:Keywords>
      <ows:WGS84BoundingBox>
        <ows:LowerCorner>10.5 -20.25</ows:LowerCorner>
        <ows:UpperCorner>15.0 -10.0</ows:UpperCorner>
      </ows:WGS84BoundingBox>
    </wfs:FeatureType>
    <wfs:FeatureType>
      <wfs:Name>Rivers</wfs:Name>
      <wfs:Title>Rivers</wfs:Title>
    </wfs:FeatureType>
  </wfs:FeatureTypeList>
</wfs:WFS_Capabilities>
"""


@pytest.fixture(autouse=True)
def clear_capabilities_cache():
    """Every test starts without cached documents."""
    WebFeatureServiceCapabilities.clear_cache()
    yield
    WebFeatureServiceCapabilities.clear_cache()


@pytest_asyncio.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Provide an async HTTP test client for integration tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def sample_capabilities_xml() -> str:
    """Provide a small WFS 2.0 GetCapabilities document."""
    return SAMPLE_CAPABILITIES_XML


@pytest.fixture
def sample_capabilities_json() -> dict:
    """Provide a parsed GetCapabilities tree, as produced by xml2json."""
    return {
        "ServiceIdentification": {"Title": "Basiskaart"},
        "FeatureTypeList": {
            "FeatureType": [
                {"Name": "ns:Roads", "Title": "Roads"},
                {"Name": "Rivers", "Title": "Rivers"},
            ]
        },
    }
