import pytest
from sqlalchemy import select

from cadastro.models import Endereco, Sequencia, Uf
from cadastro.repositorios import (
    BairroRepositorio,
    EnderecoRepositorio,
    MunicipioRepositorio,
    PessoaRepositorio,
    UfRepositorio,
)
from tests.factories import (
    BairroFactory,
    EnderecoFactory,
    MunicipioFactory,
    PessoaFactory,
    UfFactory,
)


class TestSequencia:
    """Geração de códigos pela tabela de sequências."""

    @staticmethod
    @pytest.mark.asyncio
    async def test_codigos_crescentes(async_session):
        repositorio = UfRepositorio(async_session)

        primeiro = await repositorio.proximo_codigo()
        segundo = await repositorio.proximo_codigo()

        assert (primeiro, segundo) == (1, 2)

    @staticmethod
    @pytest.mark.asyncio
    async def test_sequencias_independentes_por_entidade(async_session):
        uf = await UfFactory.create_async(async_session)
        municipio = await MunicipioFactory.create_async(async_session, uf=uf)

        assert uf.codigo_uf == 1
        assert municipio.codigo_municipio == 1

        sequencias = (
            await async_session.execute(select(Sequencia))
        ).scalars().all()
        assert {s.nome for s in sequencias} == {
            'SEQUENCE_UF',
            'SEQUENCE_MUNICIPIO',
        }

    @staticmethod
    @pytest.mark.asyncio
    async def test_codigo_nao_reutilizado(async_session):
        repositorio = EnderecoRepositorio(async_session)
        endereco = await EnderecoFactory.create_async(async_session)
        await repositorio.delete_by_codigo_endereco(endereco.codigo_endereco)

        novo = await EnderecoFactory.create_async(
            async_session,
            pessoa=await PessoaFactory.create_async(async_session),
            bairro=await BairroFactory.create_async(async_session),
        )

        assert novo.codigo_endereco == endereco.codigo_endereco + 1


class TestUfRepositorio:
    @staticmethod
    @pytest.mark.asyncio
    async def test_insert_grava_em_maiusculas(async_session):
        repositorio = UfRepositorio(async_session)

        uf = await repositorio.insert(
            Uf(sigla='sp', nome='São Paulo', status=1)
        )

        assert uf.codigo_uf == 1
        assert uf.sigla == 'SP'
        assert uf.nome == 'SÃO PAULO'

    @staticmethod
    @pytest.mark.asyncio
    async def test_find_by_nome_e_sigla_ignoram_caixa(async_session):
        uf = await UfFactory.create_async(
            async_session, nome='BAHIA', sigla='BA'
        )
        repositorio = UfRepositorio(async_session)

        assert (await repositorio.find_by_nome('bahia')) is uf
        assert (await repositorio.find_by_sigla('ba')) is uf
        assert await repositorio.find_by_sigla('SP') is None

    @staticmethod
    @pytest.mark.asyncio
    async def test_find_all_ordenado_por_codigo_decrescente(async_session):
        for nome, sigla in [('ACRE', 'AC'), ('PARÁ', 'PA'), ('GOIÁS', 'GO')]:
            await UfFactory.create_async(async_session, nome=nome, sigla=sigla)

        ufs = await UfRepositorio(async_session).find_all()

        assert [uf.codigo_uf for uf in ufs] == [3, 2, 1]

    @staticmethod
    @pytest.mark.asyncio
    async def test_find_by_filters_conjuntivo(async_session):
        await UfFactory.create_async(
            async_session, nome='ACRE', sigla='AC', status=1
        )
        await UfFactory.create_async(
            async_session, nome='PARÁ', sigla='PA', status=2
        )
        await UfFactory.create_async(
            async_session, nome='GOIÁS', sigla='GO', status=1
        )
        repositorio = UfRepositorio(async_session)

        ativos = await repositorio.find_by_filters(status=1)
        acre_inativo = await repositorio.find_by_filters(sigla='ac', status=2)
        para = await repositorio.find_by_filters(nome='pará', status=2)

        assert [uf.sigla for uf in ativos] == ['GO', 'AC']
        assert acre_inativo == []
        assert [uf.sigla for uf in para] == ['PA']

    @staticmethod
    @pytest.mark.asyncio
    async def test_find_by_status(async_session):
        await UfFactory.create_async(
            async_session, nome='ACRE', sigla='AC', status=2
        )
        await UfFactory.create_async(
            async_session, nome='PARÁ', sigla='PA', status=1
        )

        inativos = await UfRepositorio(async_session).find_by_status(2)

        assert [uf.sigla for uf in inativos] == ['AC']


class TestMunicipioBairroRepositorio:
    @staticmethod
    @pytest.mark.asyncio
    async def test_municipio_carrega_uf(async_session):
        uf = await UfFactory.create_async(
            async_session, nome='MINAS GERAIS', sigla='MG'
        )
        await MunicipioFactory.create_async(
            async_session, uf=uf, nome='Uberlândia'
        )

        municipio = await MunicipioRepositorio(async_session).find_by_nome(
            'UBERLÂNDIA'
        )

        assert municipio.nome == 'UBERLÂNDIA'
        assert municipio.uf.sigla == 'MG'

    @staticmethod
    @pytest.mark.asyncio
    async def test_municipio_find_by_codigo_uf(async_session):
        uf_a = await UfFactory.create_async(
            async_session, nome='ACRE', sigla='AC'
        )
        uf_b = await UfFactory.create_async(
            async_session, nome='PARÁ', sigla='PA'
        )
        await MunicipioFactory.create_async(async_session, uf=uf_a)
        await MunicipioFactory.create_async(async_session, uf=uf_b)
        await MunicipioFactory.create_async(async_session, uf=uf_b)

        municipios = await MunicipioRepositorio(
            async_session
        ).find_by_codigo_uf(uf_b.codigo_uf)

        assert len(municipios) == 2
        assert all(m.codigo_uf == uf_b.codigo_uf for m in municipios)

    @staticmethod
    @pytest.mark.asyncio
    async def test_bairro_update_em_maiusculas(async_session):
        bairro = await BairroFactory.create_async(async_session)
        repositorio = BairroRepositorio(async_session)

        bairro.nome = 'Centro'
        await repositorio.update(bairro)

        encontrado = await repositorio.find_by_id(bairro.codigo_bairro)
        assert encontrado.nome == 'CENTRO'
        assert encontrado.municipio.uf is not None

    @staticmethod
    @pytest.mark.asyncio
    async def test_bairro_find_by_filters(async_session):
        municipio = await MunicipioFactory.create_async(async_session)
        await BairroFactory.create_async(
            async_session, municipio=municipio, nome='CENTRO'
        )
        outro = await BairroFactory.create_async(
            async_session, municipio=municipio, nome='VILA NOVA', status=2
        )

        resultado = await BairroRepositorio(async_session).find_by_filters(
            codigo_municipio=municipio.codigo_municipio, status=2
        )

        assert [b.codigo_bairro for b in resultado] == [outro.codigo_bairro]

        do_municipio = await BairroRepositorio(
            async_session
        ).find_by_codigo_municipio(municipio.codigo_municipio)
        assert [b.nome for b in do_municipio] == ['VILA NOVA', 'CENTRO']


class TestPessoaEnderecoRepositorio:
    @staticmethod
    @pytest.mark.asyncio
    async def test_find_by_filters_login_sem_caixa(async_session):
        pessoa = await PessoaFactory.create_async(
            async_session, login='Maria.Silva'
        )
        repositorio = PessoaRepositorio(async_session)

        assert await repositorio.find_by_filters(login='maria.silva') == [
            pessoa
        ]
        assert await repositorio.find_by_login('maria.silva') is None

    @staticmethod
    @pytest.mark.asyncio
    async def test_find_by_filters_login_acentuado(async_session):
        pessoa = await PessoaFactory.create_async(async_session, login='joão')
        await PessoaFactory.create_async(async_session, login='joana')
        repositorio = PessoaRepositorio(async_session)

        assert await repositorio.find_by_filters(login='joão') == [pessoa]

    @staticmethod
    @pytest.mark.asyncio
    async def test_enderecos_da_pessoa(async_session):
        pessoa = await PessoaFactory.create_async(async_session)
        bairro = await BairroFactory.create_async(async_session)
        primeiro = await EnderecoFactory.create_async(
            async_session, pessoa=pessoa, bairro=bairro
        )
        segundo = await EnderecoFactory.create_async(
            async_session, pessoa=pessoa, bairro=bairro
        )
        await EnderecoFactory.create_async(async_session, bairro=bairro)

        enderecos = await EnderecoRepositorio(
            async_session
        ).find_by_codigo_pessoa(pessoa.codigo_pessoa)

        assert [e.codigo_endereco for e in enderecos] == [
            primeiro.codigo_endereco,
            segundo.codigo_endereco,
        ]
        assert enderecos[0].bairro.municipio.uf is not None

    @staticmethod
    @pytest.mark.asyncio
    async def test_delete_by_codigo_pessoa(async_session):
        pessoa = await PessoaFactory.create_async(async_session)
        bairro = await BairroFactory.create_async(async_session)
        for _ in range(2):
            await EnderecoFactory.create_async(
                async_session, pessoa=pessoa, bairro=bairro
            )
        outro = await EnderecoFactory.create_async(
            async_session, bairro=bairro
        )

        await EnderecoRepositorio(async_session).delete_by_codigo_pessoa(
            pessoa.codigo_pessoa
        )

        restantes = (
            await async_session.execute(select(Endereco))
        ).scalars().all()
        assert [e.codigo_endereco for e in restantes] == [
            outro.codigo_endereco
        ]
