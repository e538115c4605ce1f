# isinfo/renderers/html/styles.py
"""
CSS and JavaScript for the environment report page
"""


def get_css() -> str:
    """Get CSS styles for the report (right-to-left card layout)"""
    return """
    body{font-family:'Vazir',Tahoma,sans-serif;background:#f4f7fe;margin:0}
    header{background:linear-gradient(90deg,#1e3cfc,#4c6ef5);color:#fff;text-align:center;padding:20px;font-size:20px;font-weight:bold}
    header span{display:block;font-size:14px;opacity:.9}
    .container{max-width:1100px;margin:30px auto;padding:25px;background:#fff;border-radius:20px;box-shadow:0 6px 20px rgba(0,0,0,.08)}
    h2{color:#1e3cfc;border-bottom:2px solid #e9ecef;padding-bottom:8px;margin:20px 0;font-size:18px}
    table{width:100%;border-collapse:collapse;margin-bottom:25px}
    table td{padding:10px 12px;border-bottom:1px solid #e9ecef;font-size:15px}
    table td i{color:#4c6ef5;margin-left:6px}
    table tr:last-child td{border-bottom:none}
    .search-box{position:relative;margin:20px 0}
    .search-box input{width:100%;padding:12px 40px;border:1px solid #cfe0ff;border-radius:12px;font-family:'Vazir';box-sizing:border-box}
    .search-box i{position:absolute;right:12px;top:50%;transform:translateY(-50%);color:#4c6ef5}
    ul{list-style:none;padding:0;margin:0;display:grid;grid-template-columns:repeat(auto-fill,minmax(200px,1fr));gap:10px}
    li{padding:12px;border-radius:10px;font-size:14px;display:flex;align-items:center;gap:8px;border:1px solid #dee2e6}
    .active-module{background:#e6ffed;border-color:#b2f2bb;color:#2b8a3e}
    .inactive-module{background:#ffe3e3;border-color:#ffa8a8;color:#c92a2a}
    .disabled-func{background:#f3e8ff;border-color:#d0bfff;color:#7048e8}
    .status-card-container{display:flex;gap:20px;flex-wrap:wrap;margin:20px 0}
    .status-card{flex:1 1 250px;background:linear-gradient(145deg,#f8f9fa,#e9ecef);border-radius:15px;padding:20px;box-shadow:0 4px 10px rgba(0,0,0,.05);text-align:center;transition:all .3s ease}
    .status-card:hover{transform:translateY(-4px);box-shadow:0 6px 14px rgba(0,0,0,.1)}
    .status-icon{font-size:36px;margin-bottom:10px}
    .status-active{color:#2b8a3e}
    .status-inactive{color:#c92a2a}
    .status-name{font-size:16px;font-weight:bold;color:#333}
    .status-version{font-size:14px;color:#666;margin-top:4px}
    .no-result{text-align:center;color:#999;margin-top:15px;display:none}
    """


def get_js() -> str:
    """
    Module search.

    Same rule as isinfo.core.search.filter_lists: visibility of every item
    is recomputed from the current query on each input event.
    """
    return """
    (function () {
      const searchBox = document.getElementById('searchBox');
      const lists = [document.getElementById('activeList'), document.getElementById('inactiveList')];
      const noResult = document.getElementById('noResult');

      function visibleItems(items, query) {
        const visible = new Set();
        for (let i = 0; i < items.length; i++) {
          if (items[i].toLowerCase().includes(query)) {
            visible.add(i);
          }
        }
        return visible;
      }

      searchBox.addEventListener('input', function () {
        const query = this.value.toLowerCase();
        let found = false;
        lists.forEach(function (list) {
          const items = list.getElementsByTagName('li');
          const texts = Array.prototype.map.call(items, function (li) { return li.textContent; });
          const visible = visibleItems(texts, query);
          for (let i = 0; i < items.length; i++) {
            items[i].style.display = visible.has(i) ? '' : 'none';
          }
          if (visible.size > 0) {
            found = true;
          }
        });
        noResult.style.display = found ? 'none' : 'block';
      });
    })();
    """
