from datetime import date
from urllib.parse import quote

from kyuyo import models
from kyuyo.ocr import pdf_parser

PAYSLIP_TEXT = (
    "2025(令和07)年6月25日支給分 固定外残業時間 15:30 基本給(月給) 300,000 "
    "健康保険料 15,000 合計 108,000 455,000 差引支給額: 347,000"
)


def save_payslip(client, year, month, **values):
    payload = {"year": year, "month": month, **values}
    res = client.post('/api/payslips/save', json=payload)
    assert res.status_code == 200
    return res.json()


def test_read_root(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.json() == {"message": "KyuyoNote API"}


def test_upload_and_save(client, monkeypatch):
    monkeypatch.setattr(pdf_parser, "extract_text_from_pdf", lambda content: PAYSLIP_TEXT)
    files = {'file': ('june.pdf', b'%PDF-1.4 dummy', 'application/pdf')}
    res = client.post('/api/payslips/upload', files=files)
    assert res.status_code == 200
    preview = res.json()
    assert preview['step'] == 'confirm'
    assert preview['file_name'] == 'june.pdf'
    data = preview['data']
    assert data['year'] == 2025
    assert data['month'] == 6
    assert data['extra_overtime_minutes'] == '15:30'
    assert data['base_salary'] == '300,000'
    assert data['total_earnings'] == '455,000'
    assert data['total_deductions'] == '108,000'
    assert data['net_salary'] == '347,000'

    save_res = client.post('/api/payslips/save', json=data)
    assert save_res.status_code == 200
    saved = save_res.json()
    assert saved['success'] is True
    assert saved['message'] == '給与明細を保存しました'

    detail = client.get(f"/api/payslips/{saved['id']}").json()
    assert detail['extra_overtime_minutes'] == 930
    assert detail['base_salary'] == 300000
    assert detail['net_salary'] == 347000


def test_upload_unreadable_pdf_returns_default_form(client):
    files = {'file': ('broken.pdf', b'not really a pdf', 'application/pdf')}
    res = client.post('/api/payslips/upload', files=files)
    assert res.status_code == 200
    data = res.json()['data']
    today = date.today()
    assert (data['year'], data['month']) == (today.year, today.month)
    assert data['net_salary'] == '0'


def test_upload_image_returns_default_form(client):
    files = {'file': ('slip.jpg', b'\xff\xd8\xff', 'image/jpeg')}
    res = client.post('/api/payslips/upload', files=files)
    assert res.status_code == 200
    assert res.json()['data']['base_salary'] == '0'


def test_upload_rejects_invalid_files(client):
    res = client.post('/api/payslips/upload', files={'file': ('a.txt', b'hello', 'text/plain')})
    assert res.status_code == 400
    assert res.json()['detail'] == 'PDF または画像ファイル（PNG, JPG）を選択してください'

    res = client.post('/api/payslips/upload', files={'file': ('a.pdf', b'', 'application/pdf')})
    assert res.status_code == 400
    assert res.json()['detail'] == 'ファイルが選択されていません'


def test_save_rejects_invalid_values(client):
    res = client.post('/api/payslips/save', json={'year': 2025, 'month': 13})
    assert res.status_code == 422
    assert res.json()['detail'] == '入力内容に誤りがあります'

    res = client.post('/api/payslips/save', json={'year': 2025, 'month': 6, 'base_salary': '99,999,999,999,999,999,999'})
    assert res.status_code == 422
    assert res.json()['detail'] == '入力内容に誤りがあります'


def test_list_by_year(client):
    save_payslip(client, 2024, 12, net_salary='200,000')
    save_payslip(client, 2025, 2, net_salary='220,000')
    save_payslip(client, 2025, 1, net_salary='210,000')

    default = client.get('/api/payslips/').json()
    assert default['selected_year'] == 2025
    assert default['available_years'] == [2025, 2024]
    assert [r['month'] for r in default['records']] == [1, 2]

    all_years = client.get('/api/payslips/?year=all').json()
    assert all_years['selected_year'] == 'all'
    assert [(r['year'], r['month']) for r in all_years['records']] == [(2025, 2), (2025, 1), (2024, 12)]

    only_2024 = client.get('/api/payslips/?year=2024').json()
    assert [r['net_salary'] for r in only_2024['records']] == [200000]


def test_list_without_records_defaults_to_current_year(client):
    res = client.get('/api/payslips/').json()
    assert res['records'] == []
    assert res['selected_year'] == date.today().year


def test_get_and_delete(client):
    saved = save_payslip(client, 2025, 3)
    assert client.get(f"/api/payslips/{saved['id']}").status_code == 200

    del_res = client.delete(f"/api/payslips/{saved['id']}")
    assert del_res.status_code == 200
    assert del_res.json() == {"status": "deleted"}
    assert client.get(f"/api/payslips/{saved['id']}").status_code == 404
    assert client.delete(f"/api/payslips/{saved['id']}").status_code == 404


def test_export_csv(client):
    save_payslip(client, 2025, 2, base_salary='300,000', net_salary='250,000')
    save_payslip(client, 2025, 1, base_salary='290,000', net_salary='240,000')
    save_payslip(client, 2024, 12, base_salary='280,000', net_salary='230,000')

    res = client.get('/api/payslips/export?range=year&year=2025')
    assert res.status_code == 200
    assert 'text/csv' in res.headers['content-type']
    assert quote('給与明細_2025.csv') in res.headers['content-disposition']
    lines = res.text.split('\n')
    assert lines[0].startswith('年月,基本給')
    assert lines[1] == '2025年1月,290000,0,0,0,0,0,0,0,0,0,240000'
    assert lines[2].startswith('2025年2月,300000')
    assert len(lines) == 3

    res = client.get('/api/payslips/export?range=month&year=2024&month=12')
    assert quote('給与明細_2024_12.csv') in res.headers['content-disposition']
    assert res.text.split('\n')[1].startswith('2024年12月')

    res = client.get('/api/payslips/export')
    assert len(res.text.split('\n')) == 4


def test_export_requires_period(client):
    assert client.get('/api/payslips/export?range=year').status_code == 400
    assert client.get('/api/payslips/export?range=month&year=2025').status_code == 400


def test_dashboard(client):
    save_payslip(client, 2024, 6, net_salary='200,000', total_earnings='260,000', total_deductions='60,000')
    save_payslip(client, 2025, 6, net_salary='250,000', total_earnings='320,000', total_deductions='70,000')

    res = client.get('/api/dashboard/')
    assert res.status_code == 200
    body = res.json()
    assert body['summary']['total_net_salary'] == 450000
    assert body['summary']['average_net_salary'] == 225000
    assert body['summary']['total_earnings'] == 580000
    assert body['summary']['total_deductions'] == 130000
    assert body['summary']['year_over_year_change'] == 25.0
    assert [r['year'] for r in body['monthly_salaries']] == [2024, 2025]
    assert body['recent_records'][0]['year'] == 2025


def test_theme_cookie(client):
    assert client.get('/api/settings/theme').json() == {'theme': 'light'}

    res = client.post('/api/settings/theme', json={'theme': 'dark'})
    assert res.status_code == 200
    cookie = res.headers['set-cookie']
    assert 'theme=dark' in cookie
    assert 'HttpOnly' in cookie
    assert 'Max-Age=31536000' in cookie

    assert client.get('/api/settings/theme').json() == {'theme': 'dark'}

    assert client.post('/api/settings/theme', json={'theme': 'blue'}).status_code == 400


def test_theme_toggle(client):
    client.cookies.set('theme', 'dark')
    res = client.post('/api/settings/theme/toggle')
    assert res.json() == {'theme': 'light'}


def test_navigation(client):
    items = client.get('/api/settings/navigation').json()
    assert [i['path'] for i in items] == ['/', '/payslips', '/payslips/upload']
    assert items[0]['label'] == 'ダッシュボード'


def test_navigation_include_inactive(client, db_session):
    upload = db_session.query(models.Navigation).filter_by(path='/payslips/upload').one()
    upload.is_active = False
    db_session.commit()

    active = client.get('/api/settings/navigation').json()
    assert [i['path'] for i in active] == ['/', '/payslips']

    items = client.get('/api/settings/navigation', params={'include_inactive': 'true'}).json()
    assert [i['path'] for i in items] == ['/', '/payslips', '/payslips/upload']
    assert items[2]['is_active'] is False
