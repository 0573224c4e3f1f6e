import pytest
from py_ecc.optimized_bls12_381 import G1, G2, multiply

from zk_embed.vk import VerifyingKey


@pytest.fixture(scope="session")
def sample_vk():
    return VerifyingKey(
        alpha_g1=multiply(G1, 5),
        beta_g2=multiply(G2, 7),
        gamma_g2=G2,
        delta_g2=multiply(G2, 11),
        gamma_abc_g1=(G1, multiply(G1, 3)),
    )


@pytest.fixture(scope="session")
def vk_compressed(sample_vk):
    return sample_vk.to_bytes(compressed=True)


@pytest.fixture(scope="session")
def vk_uncompressed(sample_vk):
    return sample_vk.to_bytes(compressed=False)
